"""Client configuration.

The configuration is assembled once by the entry point from an explicit home
directory and threaded into the client. No component below the entry point
reads the process environment.
"""

from dataclasses import dataclass, replace
from pathlib import Path

DEFAULT_SOURCE = "https://raw.githubusercontent.com/martellcode/vega-population/main/"
VEGA_HOME_DIRNAME = ".vega"
CACHE_SUBDIR = Path("cache") / "population"


@dataclass(frozen=True)
class PopulationConfig:
    """Immutable client configuration.

    Attributes:
        source: Local directory or http(s) URL of the population repository
        cache_dir: Directory holding cached index files
        install_dir: Root directory items are installed under
        no_cache: Bypass the index cache entirely
    """

    source: str
    cache_dir: Path
    install_dir: Path
    no_cache: bool = False

    def with_overrides(
        self,
        *,
        source: str | None = None,
        cache_dir: Path | None = None,
        install_dir: Path | None = None,
        no_cache: bool | None = None,
    ) -> "PopulationConfig":
        """Return a new config with the given options applied.

        Options left as None keep their current value.
        """
        return replace(
            self,
            source=source if source is not None else self.source,
            cache_dir=cache_dir if cache_dir is not None else self.cache_dir,
            install_dir=install_dir if install_dir is not None else self.install_dir,
            no_cache=no_cache if no_cache is not None else self.no_cache,
        )


def default_config(home: Path) -> PopulationConfig:
    """Build the default configuration rooted at a user's home directory.

    Args:
        home: User home directory (the caller resolves it)

    Returns:
        Config installing into ~/.vega and caching into ~/.vega/cache/population
    """
    vega_home = home / VEGA_HOME_DIRNAME
    return PopulationConfig(
        source=DEFAULT_SOURCE,
        cache_dir=vega_home / CACHE_SUBDIR,
        install_dir=vega_home,
    )
