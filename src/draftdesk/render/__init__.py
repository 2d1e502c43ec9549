"""Outline derivation and content rendering."""

from __future__ import annotations

from draftdesk.render.blocks import DocumentView, render_blocks, render_html
from draftdesk.render.outline import HEADING_RE, derive_outline, find_entry

__all__ = [
    "DocumentView",
    "HEADING_RE",
    "derive_outline",
    "find_entry",
    "render_blocks",
    "render_html",
]
