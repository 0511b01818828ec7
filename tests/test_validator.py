import json
from pathlib import Path

import pytest

from lse.validator import (
    load_collection,
    resolve_collection,
    validate_config,
    validate_syntactic,
)


def write_config(tmp_path, config):
    path = tmp_path / "collection.json"
    path.write_text(json.dumps(config), encoding="utf-8")
    return path


def test_syntactic_requires_paths():
    errors = validate_syntactic({"name": "x"})
    assert len(errors) == 2
    assert any("'manifest'" in e for e in errors)
    assert any("'noise_words'" in e for e in errors)


def test_syntactic_rejects_bad_optional_fields():
    errors = validate_syntactic(
        {"manifest": "docs.txt", "noise_words": "n.txt", "documents_dir": 3}
    )
    assert errors == ["'documents_dir' must be a non-empty string if provided."]


def test_resolve_defaults_to_manifest_directory(tmp_path):
    collection = resolve_collection(
        {"manifest": "corpus/docs.txt", "noise_words": "noise.txt"}, tmp_path
    )
    assert collection["name"] == "docs"
    assert Path(collection["documents_dir"]) == tmp_path / "corpus"
    assert Path(collection["noise_words"]) == tmp_path / "noise.txt"


def test_validate_config_passes(tmp_path):
    (tmp_path / "docs.txt").write_text("a.txt\n", encoding="utf-8")
    (tmp_path / "noise.txt").write_text("the\n", encoding="utf-8")
    path = write_config(
        tmp_path, {"name": "poems", "manifest": "docs.txt", "noise_words": "noise.txt"}
    )
    assert validate_config(str(path)) == (True, [])


def test_validate_config_missing_files(tmp_path):
    path = write_config(
        tmp_path,
        {"manifest": "docs.txt", "noise_words": "noise.txt", "documents_dir": "texts"},
    )
    passed, errors = validate_config(str(path))
    assert not passed
    assert len(errors) == 3


def test_validate_config_invalid_json(tmp_path):
    path = tmp_path / "collection.json"
    path.write_text("{not json", encoding="utf-8")
    passed, errors = validate_config(str(path))
    assert not passed
    assert errors[0].startswith("Invalid JSON")


def test_validate_config_missing_file(tmp_path):
    passed, errors = validate_config(str(tmp_path / "nope.json"))
    assert not passed
    assert "not found" in errors[0]


def test_load_collection_rejects_invalid(tmp_path):
    path = write_config(tmp_path, {"manifest": ""})
    with pytest.raises(ValueError):
        load_collection(str(path))
