"""Collection config loading and validation.

Syntactic = structure and types.
Semantic  = the referenced manifest, noise-word list and documents
            directory exist on disk.
"""

from __future__ import annotations

import json
from pathlib import Path

DEFAULT_MANIFEST = "docs.txt"
DEFAULT_NOISE_WORDS = "noisewords.txt"


# ── Syntactic Validation ────────────────────────────────────────────

def validate_syntactic(config: dict) -> list[str]:
    """Check required fields and types.  Returns list of error strings."""
    errors: list[str] = []

    if not isinstance(config, dict):
        return ["Config must be a JSON object."]

    for key in ("manifest", "noise_words"):
        if not isinstance(config.get(key), str) or not config[key]:
            errors.append(f"'{key}' is required and must be a non-empty string.")

    for key in ("name", "documents_dir"):
        value = config.get(key)
        if value is not None and (not isinstance(value, str) or not value):
            errors.append(f"'{key}' must be a non-empty string if provided.")

    return errors


# ── Semantic Validation ─────────────────────────────────────────────

def validate_semantic(collection: dict) -> list[str]:
    """Check that a resolved collection points at real files."""
    errors: list[str] = []

    if not Path(collection["manifest"]).is_file():
        errors.append(f"Manifest not found: {collection['manifest']}")
    if not Path(collection["noise_words"]).is_file():
        errors.append(f"Noise word list not found: {collection['noise_words']}")
    if not Path(collection["documents_dir"]).is_dir():
        errors.append(f"Documents directory not found: {collection['documents_dir']}")

    return errors


# ── Loading ─────────────────────────────────────────────────────────

def resolve_collection(config: dict, base_dir: str | Path = ".") -> dict:
    """Resolve relative paths against base_dir and fill in defaults."""
    base = Path(base_dir)
    manifest = base / config["manifest"]
    documents_dir = base / config["documents_dir"] if config.get("documents_dir") else manifest.parent
    return {
        "name": config.get("name") or manifest.stem,
        "manifest": str(manifest),
        "noise_words": str(base / config["noise_words"]),
        "documents_dir": str(documents_dir),
    }


def default_collection(
    manifest: str = DEFAULT_MANIFEST,
    noise_words: str = DEFAULT_NOISE_WORDS,
) -> dict:
    return resolve_collection({"manifest": manifest, "noise_words": noise_words})


def load_collection(config_path: str) -> dict:
    """Read a collection config and resolve it relative to its own directory.

    Raises ValueError if the config fails syntactic validation.
    """
    path = Path(config_path)
    config = json.loads(path.read_text())
    errors = validate_syntactic(config)
    if errors:
        raise ValueError("; ".join(errors))
    return resolve_collection(config, path.parent)


# ── Top-level validate ──────────────────────────────────────────────

def validate_config(config_path: str) -> tuple[bool, list[str]]:
    """Run syntactic + semantic validation on a config file.

    Returns (passed, errors).
    """
    path = Path(config_path)
    try:
        config = json.loads(path.read_text())
    except json.JSONDecodeError as e:
        return False, [f"Invalid JSON: {e}"]
    except FileNotFoundError:
        return False, [f"Config file not found: {config_path}"]

    syn_errors = validate_syntactic(config)
    if syn_errors:
        return False, syn_errors

    sem_errors = validate_semantic(resolve_collection(config, path.parent))
    if sem_errors:
        return False, sem_errors

    return True, []
