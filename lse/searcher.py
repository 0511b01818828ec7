"""Two-keyword OR search over a KeywordIndex.

Both keywords' occurrence lists are concatenated, stably sorted by
frequency (so ties favour the first keyword), reduced to one entry per
document and cut to the top results.
"""

from __future__ import annotations

from lse.indexer import KeywordIndex, Occurrence

MAX_RESULTS = 5


def rank_occurrences(
    index: KeywordIndex,
    kw1: str | None,
    kw2: str | None,
    limit: int = MAX_RESULTS,
) -> list[Occurrence]:
    """Ranked occurrences for "kw1 or kw2", at most one per document."""
    combined = [
        *(index.occurrences(kw1) if kw1 else []),
        *(index.occurrences(kw2) if kw2 else []),
    ]
    combined.sort(key=lambda occ: occ.frequency, reverse=True)

    seen: set[str] = set()
    ranked: list[Occurrence] = []
    for occ in combined:
        if occ.document in seen:
            continue
        seen.add(occ.document)
        ranked.append(occ)
        if len(ranked) == limit:
            break
    return ranked


def top5_search(index: KeywordIndex, kw1: str | None, kw2: str | None) -> list[str]:
    """Documents containing kw1 or kw2, highest frequency first (at most 5).

    Returns an empty list when neither keyword is indexed.
    """
    return [occ.document for occ in rank_occurrences(index, kw1, kw2)]
