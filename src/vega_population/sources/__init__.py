"""Population sources.

Import from submodules:
- fetcher: Fetcher, LocalFetcher, HttpFetcher, create_fetcher
- source: PopulationSource
"""
