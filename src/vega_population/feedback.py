"""Diagnostic output decoupled from any particular stream.

Core components report non-fatal events (a cache write that failed, a
dependency that was already installed, what a dry run would do) through a
Feedback instance supplied by their caller. The library default routes
messages to `logging`; the CLI shows them on stderr.
"""

import logging
from abc import ABC, abstractmethod

from vega_population.cli.output import user_output

logger = logging.getLogger(__name__)


class Feedback(ABC):
    """Receives user-relevant diagnostics from core operations.

    Usage:
        feedback.info("Installing persona 'cmo'...")
        feedback.warning("Failed to cache skills-index.yaml: ...")
    """

    @abstractmethod
    def info(self, message: str) -> None:
        """Report progress."""

    @abstractmethod
    def warning(self, message: str) -> None:
        """Report a non-fatal problem."""


class LoggingFeedback(Feedback):
    """Feedback routed to the module logger (library default)."""

    def info(self, message: str) -> None:
        logger.info(message)

    def warning(self, message: str) -> None:
        logger.warning(message)


class InteractiveFeedback(Feedback):
    """Feedback shown to a CLI user on stderr."""

    def info(self, message: str) -> None:
        user_output(message)

    def warning(self, message: str) -> None:
        user_output(f"Warning: {message}")
