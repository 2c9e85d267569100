"""Relevance-scored search across population indexes.

Scores are in [0, 1]; 0 excludes an entry. For skills and personas:

    exact name            1.0 (short-circuits)
    name substring        0.8
    tag equals query      0.7
    tag substring         0.6
    description substring 0.5

Profiles have no tags, so any tag filter excludes them. They score 1.0 / 0.8
/ 0.5 on name and description, and 0.4 when a referenced skill or persona
name contains the query.

Results are ranked by descending score, then ascending name.
"""

import threading
from collections.abc import Collection, Iterable

from vega_population.models.index import IndexEntry, ProfileIndexEntry
from vega_population.models.kind import ALL_KINDS, ItemKind
from vega_population.models.results import SearchOptions, SearchResult
from vega_population.sources.source import PopulationSource

EXACT_NAME_SCORE = 1.0
NAME_SUBSTRING_SCORE = 0.8
TAG_EXACT_SCORE = 0.7
TAG_SUBSTRING_SCORE = 0.6
DESCRIPTION_SCORE = 0.5
PROFILE_REFERENCE_SCORE = 0.4


def score_entry(
    query: str, name: str, entry: IndexEntry, filter_tags: Collection[str] = ()
) -> float:
    """Score a skill or persona entry against a query.

    Args:
        query: Search text (compared case-insensitively)
        name: Entry name
        entry: Index entry
        filter_tags: If non-empty, the entry must carry one of these tags

    Returns:
        Relevance score, 0 when the entry does not match
    """
    wanted = {tag.lower() for tag in filter_tags}
    tags = [tag.lower() for tag in entry.tags]
    if wanted and not any(tag in wanted for tag in tags):
        return 0.0

    query = query.lower()
    name = name.lower()
    if name == query:
        return EXACT_NAME_SCORE

    score = 0.0
    if query in name:
        score = NAME_SUBSTRING_SCORE
    if any(tag == query for tag in tags):
        score = max(score, TAG_EXACT_SCORE)
    if any(query in tag for tag in tags):
        score = max(score, TAG_SUBSTRING_SCORE)
    if query in entry.description.lower():
        score = max(score, DESCRIPTION_SCORE)
    return score


def score_profile(
    query: str, name: str, entry: ProfileIndexEntry, filter_tags: Collection[str] = ()
) -> float:
    """Score a profile entry against a query.

    Profiles carry no tags, so any tag filter excludes them.
    """
    if filter_tags:
        return 0.0

    query = query.lower()
    name = name.lower()
    if name == query:
        return EXACT_NAME_SCORE

    score = 0.0
    if query in name:
        score = NAME_SUBSTRING_SCORE
    if query in entry.description.lower():
        score = max(score, DESCRIPTION_SCORE)
    if any(query in skill.lower() for skill in entry.skills):
        score = max(score, PROFILE_REFERENCE_SCORE)
    if query in entry.persona.lower():
        score = max(score, PROFILE_REFERENCE_SCORE)
    return score


def rank_results(results: Iterable[SearchResult], limit: int = 0) -> list[SearchResult]:
    """Order results by descending score, then name, then kind.

    A positive limit truncates the ranked list; zero or negative keeps all.
    """
    ranked = sorted(results, key=lambda r: (-r.score, r.name, ALL_KINDS.index(r.kind)))
    if limit > 0:
        return ranked[:limit]
    return ranked


def search(
    source: PopulationSource,
    query: str,
    options: SearchOptions,
    *,
    cancel: threading.Event | None = None,
) -> list[SearchResult]:
    """Search the indexes of the selected kinds and rank the matches.

    Raises:
        FetchError: If an index cannot be fetched
        ParseError: If an index is malformed
    """
    kinds = (options.kind,) if options.kind is not None else ALL_KINDS

    results: list[SearchResult] = []
    for kind in kinds:
        if kind == ItemKind.PROFILE:
            for name, profile in source.get_profile_index(cancel=cancel).items():
                score = score_profile(query, name, profile, options.tags)
                if score > 0:
                    results.append(
                        SearchResult(
                            kind=kind,
                            name=name,
                            version=profile.version,
                            description=profile.description,
                            tags=(),
                            score=score,
                        )
                    )
        else:
            for name, entry in source.get_item_index(kind, cancel=cancel).items():
                score = score_entry(query, name, entry, options.tags)
                if score > 0:
                    results.append(
                        SearchResult(
                            kind=kind,
                            name=name,
                            version=entry.version,
                            description=entry.description,
                            tags=entry.tags,
                            score=score,
                        )
                    )

    return rank_results(results, options.limit)
