"""Document output model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

UNTITLED = "Untitled Document"


class DocumentOutput(BaseModel):
    """The validated reply of one drafting turn.

    `content` always holds the complete document text; a later turn replaces it wholesale.
    """

    model_config = ConfigDict(populate_by_name=True, strict=True, frozen=True)

    title: str
    content: str
    is_full_report: bool = Field(alias="isFullReport")

    @property
    def display_title(self) -> str:
        return self.title or UNTITLED

    @property
    def label(self) -> str:
        """Badge text shown above the title."""

        return "Full Generated Report" if self.is_full_report else "Surgical Revision"
