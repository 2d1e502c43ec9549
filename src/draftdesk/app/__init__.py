from __future__ import annotations

from draftdesk.app.controller import DraftingController
from draftdesk.app.state import AppState

__all__ = ["AppState", "DraftingController"]
