"""Clock abstraction for testing.

The index cache compares file modification times against the current time.
Routing "now" through this ABC lets tests expire cache entries without
sleeping or touching file timestamps.
"""

from abc import ABC, abstractmethod


class Time(ABC):
    """Abstract clock for dependency injection."""

    @abstractmethod
    def now(self) -> float:
        """Return the current time as seconds since the epoch."""
        ...
