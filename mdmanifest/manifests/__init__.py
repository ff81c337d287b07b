"""Manifest data structures and helpers."""

from .models import ManifestItem
from .parser import ScanState, load_manifest_document, parse_manifest
from .writer import write_merged_manifest

__all__ = [
    "ManifestItem",
    "ScanState",
    "load_manifest_document",
    "parse_manifest",
    "write_merged_manifest",
]
