"""Outline derivation from markdown headings."""

from __future__ import annotations

import re
from typing import Sequence

from draftdesk.models import OutlineEntry

# One to three leading hashes, whitespace, then the heading text up to any line terminator.
HEADING_RE = re.compile(r"^(?P<hashes>#{1,3})\s+(?P<text>[^\r\n\u2028\u2029]+)")


def section_id(line_index: int) -> str:
    """Anchor id of the heading on a given line."""

    return f"section-{line_index}"


def split_lines(content: str) -> list[str]:
    return content.split("\n")


def derive_outline(content: str) -> list[OutlineEntry]:
    """Derive the ordered outline of a markdown document.

    Args:
        content: Markdown text, possibly empty.

    Returns:
        One entry per heading line, in line order. Bold markers are stripped from entry text.
    """

    entries: list[OutlineEntry] = []
    if not content:
        return entries
    for index, line in enumerate(split_lines(content)):
        m = HEADING_RE.match(line)
        if not m:
            continue
        entries.append(
            OutlineEntry(
                id=section_id(index),
                text=m.group("text").replace("**", "").strip(),
                level=len(m.group("hashes")),
            )
        )
    return entries


def find_entry(outline: Sequence[OutlineEntry], entry_id: str) -> OutlineEntry | None:
    for entry in outline:
        if entry.id == entry_id:
            return entry
    return None
