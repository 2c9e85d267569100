"""Data models for vega-population.

Import from submodules:
- kind: ItemKind, parse_item_name, format_item_name
- config: PopulationConfig, default_config
- index: IndexEntry, ProfileIndexEntry, ItemIndex, ProfileIndex
- manifest: Manifest
- results: SearchOptions, SearchResult, InstallOptions, InstallResult, InstalledItem, ItemInfo
"""
