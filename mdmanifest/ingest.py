"""Discover manifest documents in a directory and merge their items."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable

from .config import MergeConfig
from .manifests import ManifestItem, load_manifest_document

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class LoadedDocument:
    """A source document that contributed at least one item."""

    name: str
    path: Path
    items: list[ManifestItem]


@dataclass(slots=True)
class LoadFailure:
    """A source document that could not be read or parsed."""

    name: str
    path: Path
    message: str


@dataclass(slots=True)
class MergeResult:
    """Merged items plus the per-document outcome of a merge run."""

    items: list[ManifestItem] = field(default_factory=list)
    loaded: list[LoadedDocument] = field(default_factory=list)
    failures: list[LoadFailure] = field(default_factory=list)

    @property
    def file_count(self) -> int:
        return len(self.loaded)

    @property
    def item_count(self) -> int:
        return len(self.items)


def discover_manifest_files(directory: str | Path, suffix: str = ".md") -> list[Path]:
    """Return entries of ``directory`` whose name ends with ``suffix``, sorted by name."""
    root = Path(directory)
    entries = [entry for entry in root.iterdir() if entry.name.endswith(suffix)]
    return sorted(entries, key=lambda entry: entry.name)


def merge_manifest_directory(
    directory: str | Path,
    config: MergeConfig | None = None,
    *,
    on_loaded: Callable[[LoadedDocument], None] | None = None,
    on_failed: Callable[[LoadFailure], None] | None = None,
) -> MergeResult:
    """Parse every manifest document in ``directory`` and concatenate the items.

    Documents are processed in filename order. A document that fails to load is
    recorded in ``MergeResult.failures`` and reported through ``on_failed``;
    processing continues with the next one. ``on_loaded`` is called for each
    document that yields at least one item.
    """
    config = config or MergeConfig()
    root = Path(directory)
    if not root.exists():
        raise FileNotFoundError(root)
    if not root.is_dir():
        raise NotADirectoryError(root)

    paths = discover_manifest_files(root, config.document_suffix)
    logger.debug("Discovered %d manifest document(s) in %s", len(paths), root)

    result = MergeResult()
    for path in paths:
        try:
            items = load_manifest_document(
                path,
                encoding=config.encoding,
                errors=config.decode_errors,
            )
        except Exception as exc:
            logger.debug("Failed to load manifest document %s", path, exc_info=True)
            failure = LoadFailure(name=path.name, path=path, message=str(exc))
            result.failures.append(failure)
            if on_failed is not None:
                on_failed(failure)
            continue

        if not items:
            logger.debug("No manifest items found in %s", path)
            continue

        document = LoadedDocument(name=path.name, path=path, items=items)
        result.items.extend(items)
        result.loaded.append(document)
        logger.debug("Loaded %d item(s) from %s", len(items), path)
        if on_loaded is not None:
            on_loaded(document)

    return result
