"""Indexer: counts keywords per document and merges them into an in-memory
inverted index whose occurrence lists stay sorted by descending frequency.
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path

from lse.store import DocumentSource, read_manifest, read_noise_words
from lse.text import get_keyword

logger = logging.getLogger(__name__)


@dataclass
class Occurrence:
    document: str
    frequency: int

    def __repr__(self) -> str:
        return f"({self.document},{self.frequency})"


@dataclass
class KeywordIndex:
    keywords: dict[str, list[Occurrence]] = field(default_factory=dict)
    noise_words: frozenset[str] = frozenset()

    def occurrences(self, keyword: str) -> list[Occurrence]:
        return self.keywords.get(keyword, [])

    def stats(self) -> dict:
        documents = {occ.document for occs in self.keywords.values() for occ in occs}
        return {
            "documents": len(documents),
            "keywords": len(self.keywords),
            "occurrences": sum(len(occs) for occs in self.keywords.values()),
            "noise_words": len(self.noise_words),
        }


# ── Per-document loading ────────────────────────────────────────────

def load_keywords_from_document(
    document: str,
    source: DocumentSource,
    noise_words: frozenset[str] = frozenset(),
) -> dict[str, Occurrence]:
    """Map each keyword in a document to its Occurrence in that document.

    Raises NotFoundError if the document cannot be read.
    """
    counts: Counter[str] = Counter()
    for token in source.read_tokens(document):
        keyword = get_keyword(token, noise_words)
        if keyword is not None:
            counts[keyword] += 1

    return {kw: Occurrence(document, count) for kw, count in counts.items()}


# ── Sorted insertion ───────────────────────────────────────────────

def insert_last_occurrence(occurrences: list[Occurrence]) -> list[int]:
    """Move the last occurrence into place among the already-sorted rest.

    Elements 0..n-2 are in descending frequency order.  A binary search over
    them locates the spot for element n-1: an equal frequency stops the
    search at the midpoint, a lower one continues right, a higher one left.

    Returns the midpoint indexes examined, in order (empty for lists of
    length <= 1).
    """
    if len(occurrences) <= 1:
        return []

    target = occurrences[-1].frequency
    low, high = 0, len(occurrences) - 2
    mid = 0
    midpoints: list[int] = []

    while low <= high:
        mid = (low + high) // 2
        midpoints.append(mid)
        freq = occurrences[mid].frequency
        if freq == target:
            break
        if freq > target:
            low = mid + 1
        else:
            high = mid - 1
    else:
        # bounds crossed without a match: insert at low, not the last midpoint,
        # which would put a lower frequency ahead of a higher one after a right move
        mid = low

    occurrences.insert(mid, occurrences.pop())
    return midpoints


def merge_keywords(index: KeywordIndex, keywords: dict[str, Occurrence]) -> None:
    """Merge one document's keyword occurrences into the index."""
    for keyword, occurrence in keywords.items():
        occs = index.keywords.setdefault(keyword, [])
        occs.append(occurrence)
        midpoints = insert_last_occurrence(occs)
        logger.debug("Inserted %r into '%s' (midpoints %s)", occurrence, keyword, midpoints)


# ── Build pass ─────────────────────────────────────────────────────

def make_index(
    manifest_path: str | Path,
    noise_words_path: str | Path,
    source: DocumentSource | None = None,
) -> KeywordIndex:
    """Index every document named in the manifest.

    Documents are loaded and merged one at a time in manifest order.  A
    missing manifest, noise-word list or document raises NotFoundError and
    no index is returned.
    """
    noise_words = read_noise_words(noise_words_path)
    documents = read_manifest(manifest_path)
    if source is None:
        source = DocumentSource(Path(manifest_path).parent)

    index = KeywordIndex(noise_words=noise_words)
    for document in documents:
        kws = load_keywords_from_document(document, source, noise_words)
        logger.debug("Loaded %d keywords from %s", len(kws), document)
        merge_keywords(index, kws)

    logger.info(
        "Indexed %d documents, %d keywords", len(documents), len(index.keywords)
    )
    return index
