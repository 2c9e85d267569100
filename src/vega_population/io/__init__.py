"""File and cache I/O for vega-population.

Import from submodules:
- cache: IndexCache, index_cache_key
- manifest: parse_item_index, parse_profile_index, parse_manifest, load_manifest
"""
