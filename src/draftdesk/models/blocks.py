"""Display blocks produced from document content."""

from __future__ import annotations

from typing import Literal, Union

from pydantic import BaseModel, Field

HeadingStyle = Literal["heading-primary", "heading-secondary"]


class HeadingBlock(BaseModel):
    """A heading line, anchored by the same id as its outline entry.

    H1 uses the primary style; H2 and H3 share the secondary one.
    """

    kind: Literal["heading"] = "heading"
    line_index: int = Field(ge=0)
    id: str
    level: int = Field(ge=1, le=3)
    text: str
    style: HeadingStyle
    active: bool = False


class LineBreakBlock(BaseModel):
    """A blank line; keeps vertical spacing without opening a paragraph."""

    kind: Literal["break"] = "break"
    line_index: int = Field(ge=0)


class ParagraphBlock(BaseModel):
    """Any other line, shown verbatim."""

    kind: Literal["paragraph"] = "paragraph"
    line_index: int = Field(ge=0)
    text: str


Block = Union[HeadingBlock, LineBreakBlock, ParagraphBlock]
