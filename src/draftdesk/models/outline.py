"""Outline models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class OutlineEntry(BaseModel):
    """A navigation anchor derived from a markdown heading line.

    The id is `section-<line index>`, so it stays stable as long as the heading stays on the
    same line.
    """

    model_config = {"frozen": True}

    id: str
    text: str
    level: int = Field(ge=1, le=3)
