"""Application context with dependency injection.

PopulationContext holds everything a CLI command needs to build a client. It
is created once at the CLI entry point and threaded through Click's context
system. This is the only place that reads the process environment (the home
directory).
"""

from dataclasses import dataclass
from pathlib import Path

from vega_population.client import FetcherFactory, PopulationClient
from vega_population.feedback import Feedback, InteractiveFeedback
from vega_population.integrations.time import RealTime, Time
from vega_population.models.config import PopulationConfig, default_config
from vega_population.sources.fetcher import create_fetcher


@dataclass(frozen=True)
class PopulationContext:
    """Immutable context holding all dependencies for CLI commands.

    Attributes:
        config: Default configuration (before per-command overrides)
        feedback: Where progress and warnings are reported
        time: Clock used for cache expiry
        fetcher_factory: Builds a fetcher for a source location
        debug: Whether debug logging was requested
    """

    config: PopulationConfig
    feedback: Feedback
    time: Time
    fetcher_factory: FetcherFactory
    debug: bool

    def create_client(
        self,
        *,
        source: str | None = None,
        install_dir: Path | None = None,
        no_cache: bool = False,
    ) -> PopulationClient:
        """Build a client with command-line overrides applied."""
        config = self.config.with_overrides(
            source=source,
            install_dir=install_dir,
            no_cache=True if no_cache else None,
        )
        return PopulationClient(
            config,
            feedback=self.feedback,
            time=self.time,
            fetcher_factory=self.fetcher_factory,
        )

    @staticmethod
    def for_test(
        home: Path,
        *,
        feedback: Feedback | None = None,
        time: Time | None = None,
        fetcher_factory: FetcherFactory | None = None,
        debug: bool = False,
    ) -> "PopulationContext":
        """Create a test context rooted at a temporary home directory.

        Args:
            home: Directory standing in for the user's home
            feedback: Defaults to InteractiveFeedback so messages show in CliRunner output
            time: Defaults to RealTime
            fetcher_factory: Defaults to create_fetcher

        Example:
            >>> ctx = PopulationContext.for_test(tmp_path)
            >>> runner.invoke(cli, ["list"], obj=ctx)
        """
        return PopulationContext(
            config=default_config(home),
            feedback=feedback if feedback is not None else InteractiveFeedback(),
            time=time if time is not None else RealTime(),
            fetcher_factory=fetcher_factory if fetcher_factory is not None else create_fetcher,
            debug=debug,
        )


def create_context(*, debug: bool) -> PopulationContext:
    """Create the production context.

    Called once at CLI entry point.
    """
    return PopulationContext(
        config=default_config(Path.home()),
        feedback=InteractiveFeedback(),
        time=RealTime(),
        fetcher_factory=create_fetcher,
        debug=debug,
    )
