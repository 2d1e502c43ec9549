"""Submit handling and application state ownership.

The controller is the only writer of :class:`AppState`. One turn runs at a time; a submission
that arrives while a turn is in flight is dropped rather than queued.
"""

from __future__ import annotations

import asyncio
import threading
from typing import Any

from draftdesk.app.state import AppState
from draftdesk.config import Settings
from draftdesk.engine.session import SessionProvider
from draftdesk.errors import EngineError
from draftdesk.logging import get_logger, log_exception
from draftdesk.render.blocks import DocumentView

logger = get_logger(__name__)


class DraftingController:
    """Runs drafting turns and keeps the current document view."""

    def __init__(self, provider: SessionProvider, settings: Settings) -> None:
        self._provider = provider
        self._settings = settings
        self._gate = threading.Lock()
        self.state = AppState()
        self._view: DocumentView | None = None

    def submit(self, text: str) -> bool:
        """Run one turn for `text`.

        Returns:
            False when the submission was dropped (blank text or a turn already in flight),
            True when a turn was attempted, whether or not it succeeded.
        """

        if not text or not text.strip():
            return False
        with self._gate:
            if self.state.is_processing:
                logger.info("Submission dropped: turn in flight")
                return False
            self.state.is_processing = True
            self.state.error = None
            if not self.state.topic:
                self.state.topic = text

        try:
            session = self._provider.ensure()
            output = session.send(text)
        except EngineError as exc:
            log_exception(logger, "Drafting turn failed", kind=type(exc).__name__)
            with self._gate:
                self.state.error = self._settings.error_message
        except Exception as exc:
            log_exception(logger, "Drafting turn failed unexpectedly", kind=type(exc).__name__)
            with self._gate:
                self.state.error = self._settings.error_message
        else:
            with self._gate:
                self.state.output = output
                self._view = DocumentView(output)
        finally:
            with self._gate:
                self.state.is_processing = False
        return True

    async def submit_async(self, text: str) -> bool:
        """Async variant of :meth:`submit`; the service call runs in a worker thread."""

        return await asyncio.to_thread(self.submit, text)

    def view(self) -> DocumentView | None:
        return self._view

    def select_section(self, entry_id: str) -> str:
        """Select an outline entry of the current document.

        Raises:
            LookupError: No document yet, or the id is not in its outline.
        """

        if self._view is None:
            raise LookupError("no document to navigate")
        return self._view.select(entry_id)

    def reset(self) -> None:
        """Forget the document and the conversation."""

        with self._gate:
            if self.state.is_processing:
                raise RuntimeError("cannot reset while a turn is in flight")
            self._provider.discard()
            self.state = AppState()
            self._view = None

    def snapshot(self) -> dict[str, Any]:
        data: dict[str, Any] = self.state.snapshot()
        view = self._view
        if view is None:
            data.update(outline=[], blocks=[], active_section_id=None, label=None, display_title=None)
            return data
        data.update(
            outline=[e.model_dump() for e in view.outline],
            blocks=[b.model_dump() for b in view.blocks],
            active_section_id=view.active_section_id,
            label=view.output.label,
            display_title=view.output.display_title,
        )
        return data
