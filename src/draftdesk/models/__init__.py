"""Pydantic models used across the project."""

from __future__ import annotations

from draftdesk.models.blocks import Block, HeadingBlock, LineBreakBlock, ParagraphBlock
from draftdesk.models.document import DocumentOutput
from draftdesk.models.outline import OutlineEntry

__all__ = [
    "Block",
    "DocumentOutput",
    "HeadingBlock",
    "LineBreakBlock",
    "OutlineEntry",
    "ParagraphBlock",
]
