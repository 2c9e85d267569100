"""vega-population: install skills, personas and profiles from a population repository.

For library use, start from the client:
    from vega_population.client import PopulationClient
    from vega_population.models.config import default_config

Import from submodules:
- version: __version__
- client: PopulationClient
- models: ItemKind, PopulationConfig, Manifest, SearchResult, ...
- exceptions: PopulationError and its subclasses
"""

from vega_population.version import __version__ as __version__
