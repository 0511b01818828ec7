"""File-backed sources for the build pass.

Documents, the manifest and the noise-word list are plain text files read
once each.  Every read opens, consumes and closes the file before
returning, so no handle outlives the call.
"""

from __future__ import annotations

import logging
from pathlib import Path

from lse.text import normalize_noise_words

logger = logging.getLogger(__name__)


class NotFoundError(FileNotFoundError):
    """A document, manifest or noise-word list could not be opened."""

    def __init__(self, kind: str, path: str | Path):
        self.kind = kind
        self.path = str(path)
        super().__init__(f"{kind} not found: {self.path}")


def _read_words(path: Path, kind: str) -> list[str]:
    try:
        with open(path, "r", encoding="utf-8", errors="replace") as f:
            return f.read().split()
    except OSError as e:
        raise NotFoundError(kind, path) from e


# ── Documents ───────────────────────────────────────────────────────


class DocumentSource:
    def __init__(self, base_dir: str | Path = "."):
        self.base_dir = Path(base_dir)

    def resolve(self, document: str) -> Path:
        path = Path(document)
        return path if path.is_absolute() else self.base_dir / path

    def read_tokens(self, document: str) -> list[str]:
        """Return the whitespace-delimited tokens of a document."""
        path = self.resolve(document)
        tokens = _read_words(path, "document")
        logger.debug("Read %d tokens from %s", len(tokens), path)
        return tokens


# ── Manifest & noise words ─────────────────────────────────────────


def read_manifest(path: str | Path) -> list[str]:
    """Document identifiers to index, one per line by convention."""
    return _read_words(Path(path), "manifest")


def read_noise_words(path: str | Path) -> frozenset[str]:
    words = normalize_noise_words(_read_words(Path(path), "noise words"))
    logger.debug("Loaded %d noise words from %s", len(words), path)
    return words
