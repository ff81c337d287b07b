"""Persistence helpers for the merged manifest."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable

from .models import ManifestItem


def write_merged_manifest(
    items: Iterable[ManifestItem],
    destination: str | Path,
    *,
    indent: int = 2,
    ensure_ascii: bool = False,
) -> Path:
    """Serialize manifest items to a JSON array, replacing any existing file."""
    path = Path(destination)
    payload = [item.model_dump(mode="json") for item in items]
    text = json.dumps(payload, ensure_ascii=ensure_ascii, indent=indent)

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path
