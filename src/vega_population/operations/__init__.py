"""Operations built on a population source.

Import from submodules:
- search: search, score_entry, score_profile, rank_results
- install: install_item
- listing: list_installed
"""
