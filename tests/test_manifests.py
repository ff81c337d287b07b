import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from mdmanifest.manifests import ManifestItem, write_merged_manifest


def test_manifest_item_rejects_empty_fields() -> None:
    with pytest.raises(ValidationError):
        ManifestItem(path="", content="body")
    with pytest.raises(ValidationError):
        ManifestItem(path="a.txt", content="")


def test_manifest_writer_serializes_json(tmp_path: Path) -> None:
    items = [
        ManifestItem(path="a/b.txt", content="x\ny"),
        ManifestItem(path="notes.md", content="Héllo → wörld"),
    ]
    destination = tmp_path / "out" / "nested" / "manifest.json"

    written = write_merged_manifest(items, destination)

    assert written == destination
    data = destination.read_text(encoding="utf-8")
    assert json.loads(data) == [
        {"path": "a/b.txt", "content": "x\ny"},
        {"path": "notes.md", "content": "Héllo → wörld"},
    ]
    assert '  {\n    "path": "a/b.txt",' in data
    assert "Héllo → wörld" in data
    assert not data.endswith("\n")


def test_manifest_writer_overwrites_existing_file(tmp_path: Path) -> None:
    destination = tmp_path / "manifest.json"
    destination.write_text("stale content that is much longer than the new output", encoding="utf-8")

    write_merged_manifest([], destination)

    assert destination.read_text(encoding="utf-8") == "[]"


def test_manifest_writer_honours_formatting_options(tmp_path: Path) -> None:
    destination = tmp_path / "manifest.json"
    items = [ManifestItem(path="a.txt", content="ü")]

    write_merged_manifest(items, destination, indent=4, ensure_ascii=True)

    data = destination.read_text(encoding="utf-8")
    assert '\n        "path": "a.txt"' in data
    assert "\\u00fc" in data
