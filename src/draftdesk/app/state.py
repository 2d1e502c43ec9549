from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from draftdesk.models import DocumentOutput

Mode = Literal["genesis", "surgical_edit"]

GENESIS_PLACEHOLDER = "Enter a research topic to begin..."
REVISION_PLACEHOLDER = "Give a revision command (e.g. 'Expand the introduction')..."


@dataclass
class AppState:
    topic: str = ""
    is_processing: bool = False
    output: DocumentOutput | None = None
    error: str | None = None

    @property
    def mode(self) -> Mode:
        return "genesis" if self.output is None else "surgical_edit"

    @property
    def mode_label(self) -> str:
        return "Mode A: Genesis" if self.output is None else "Mode B: Surgical Edit"

    @property
    def placeholder(self) -> str:
        return GENESIS_PLACEHOLDER if self.output is None else REVISION_PLACEHOLDER

    def snapshot(self) -> dict[str, object]:
        return {
            "topic": self.topic,
            "is_processing": self.is_processing,
            "output": self.output.model_dump(by_alias=True) if self.output is not None else None,
            "error": self.error,
            "mode": self.mode,
            "mode_label": self.mode_label,
            "placeholder": self.placeholder,
        }
