"""Parse markdown manifest documents into `ManifestItem` instances.

A manifest document is a sequence of level-2 sections. The heading line holds
the target path; the body holds the content, either as a fenced code block or
as plain text terminated by a ``---`` rule::

    ## src/app.py
    ```python
    print("hello")
    ```

    ## README.md
    Plain markdown content.
    ---
"""

from __future__ import annotations

import logging
import re
from enum import Enum
from pathlib import Path

from .models import ManifestItem

logger = logging.getLogger(__name__)

SECTION_PATTERN = re.compile(r"^## ", re.MULTILINE)
FENCE_MARKER = "```"
RULE_MARKER = "---"


class ScanState(str, Enum):
    """Position of the section scanner relative to the content block."""

    BEFORE_CONTENT = "before_content"
    IN_FENCE = "in_fence"
    DONE = "done"


def load_manifest_document(
    path: str | Path,
    *,
    encoding: str = "utf-8",
    errors: str = "replace",
) -> list[ManifestItem]:
    """Read a markdown manifest file and parse its items.

    Undecodable bytes are replaced with U+FFFD unless ``errors`` says otherwise.
    """
    source_path = Path(path)
    text = source_path.read_text(encoding=encoding, errors=errors)
    return parse_manifest(text)


def parse_manifest(text: str) -> list[ManifestItem]:
    """Return the manifest items of a document in order of appearance."""
    items: list[ManifestItem] = []
    # Text before the first heading is not part of any section.
    for section in SECTION_PATTERN.split(text)[1:]:
        item = _parse_section(section)
        if item is not None:
            items.append(item)
    return items


def _parse_section(section: str) -> ManifestItem | None:
    lines = section.split("\n")
    path = lines[0].strip()
    content = _extract_content(lines[1:])

    if not path or not content:
        logger.debug("Skipping section %r: missing path or content.", path or lines[0])
        return None
    return ManifestItem(path=path, content=content)


def _extract_content(lines: list[str]) -> str:
    state = ScanState.BEFORE_CONTENT
    buffer: list[str] = []
    content = ""

    for index, line in enumerate(lines):
        if state is ScanState.IN_FENCE:
            if line.startswith(FENCE_MARKER):
                content = "\n".join(buffer)
                state = ScanState.DONE
                break
            buffer.append(line)
            continue

        if line.startswith(FENCE_MARKER):
            state = ScanState.IN_FENCE
            continue
        if line.strip() and not line.startswith(RULE_MARKER):
            content = _collect_until_rule(lines[index:])
            state = ScanState.DONE
            break

    if state is ScanState.IN_FENCE:
        logger.debug("Unterminated fence; discarding %d buffered line(s).", len(buffer))
    return content


def _collect_until_rule(lines: list[str]) -> str:
    collected: list[str] = []
    for line in lines:
        if line.startswith(RULE_MARKER):
            break
        collected.append(line)
    return "\n".join(collected).strip()
