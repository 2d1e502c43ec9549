"""Tests for submit handling and application state."""

from __future__ import annotations

import asyncio
import threading

import pytest

from draftdesk.app.controller import DraftingController
from draftdesk.app.state import GENESIS_PLACEHOLDER, REVISION_PLACEHOLDER
from draftdesk.config import Settings
from draftdesk.engine.session import EngineSession, SessionProvider
from draftdesk.models import DocumentOutput
from fakes import BlockingBackend, ScriptedBackend, make_controller, reply


def test_genesis_then_revision(settings: Settings) -> None:
    """It should replace the output on every successful turn and switch modes."""

    backend = ScriptedBackend(
        reply("Rapor", "# Rapor\n## Giriş\nuzun"),
        reply("Rapor", "> **SİSTEM NOTU:** Giriş güncellendi.\n# Rapor\n## Giriş\nkısa"),
    )
    controller = make_controller(backend, settings)
    assert controller.state.mode_label == "Mode A: Genesis"
    assert controller.state.placeholder == GENESIS_PLACEHOLDER

    assert controller.submit("Yapay zeka etiği") is True
    assert controller.state.topic == "Yapay zeka etiği"
    assert controller.state.mode == "surgical_edit"
    assert controller.state.placeholder == REVISION_PLACEHOLDER
    controller.select_section("section-1")

    assert controller.submit("Girişi kısalt") is True
    assert controller.state.topic == "Yapay zeka etiği"
    assert controller.state.output is not None
    assert controller.state.output.content.endswith("kısa")
    view = controller.view()
    assert view is not None
    assert [e.id for e in view.outline] == ["section-1", "section-2"]
    assert view.active_section_id is None


def test_error_keeps_previous_output(settings: Settings) -> None:
    """It should keep the last good document and show the generic message on failure."""

    backend = ScriptedBackend(reply("T", "# T"), "", "garbage", RuntimeError("401"))
    controller = make_controller(backend, settings)
    controller.submit("topic")
    before = controller.state.output

    for instruction in ("one", "two", "three"):
        assert controller.submit(instruction) is True
        assert controller.state.is_processing is False
        assert controller.state.error == "Connection Interrupted."
        assert controller.state.output is before


def test_error_clears_on_next_success(settings: Settings) -> None:
    """It should clear the error message when a later turn starts."""

    controller = make_controller(ScriptedBackend("", reply("T", "# T")), settings)
    controller.submit("topic")
    assert controller.state.error is not None
    assert controller.state.output is None

    controller.submit("topic again")
    assert controller.state.error is None
    assert controller.state.output is not None


def test_blank_submission_is_ignored(settings: Settings) -> None:
    """It should not call the service for blank input."""

    backend = ScriptedBackend()
    controller = make_controller(backend, settings)
    assert controller.submit("  ") is False
    assert backend.calls == []
    assert controller.state.topic == ""


def test_submission_while_processing_is_dropped(settings: Settings) -> None:
    """It should drop a second submission instead of queuing it."""

    backend = BlockingBackend(reply("T", "# T"))
    controller = make_controller(backend, settings)
    worker = threading.Thread(target=controller.submit, args=("topic",))
    worker.start()
    assert backend.entered.wait(timeout=5)

    assert controller.state.is_processing is True
    before = controller.snapshot()
    assert controller.submit("second") is False
    assert controller.snapshot() == before

    backend.release.set()
    worker.join(timeout=5)
    assert len(backend.calls) == 1
    assert controller.state.is_processing is False
    assert controller.state.output is not None


def test_submit_async(settings: Settings) -> None:
    """It should run a turn from async code."""

    controller = make_controller(ScriptedBackend(reply("T", "# T")), settings)
    assert asyncio.run(controller.submit_async("topic")) is True
    assert controller.state.output is not None


def test_select_section_requires_document(settings: Settings) -> None:
    """It should refuse navigation without a document or for unknown ids."""

    controller = make_controller(ScriptedBackend(reply("T", "# T\n## A")), settings)
    with pytest.raises(LookupError):
        controller.select_section("section-0")

    controller.submit("topic")
    assert controller.select_section("section-1") == "section-1"
    with pytest.raises(LookupError):
        controller.select_section("section-5")


def test_reset_starts_new_conversation(settings: Settings) -> None:
    """It should discard the session so the next turn is a fresh genesis."""

    backend = ScriptedBackend(reply("A", "# A"), reply("B", "# B"))
    controller = make_controller(backend, settings)
    controller.submit("first")
    controller.reset()

    assert controller.state.output is None
    assert controller.view() is None
    controller.submit("second")
    assert [m.role for m in backend.calls[1]] == ["system", "user"]
    assert controller.state.topic == "second"


def test_snapshot_shape(settings: Settings) -> None:
    """It should expose state, outline and blocks in JSON-ready form."""

    controller = make_controller(
        ScriptedBackend(reply("", "# T\n\nbody", is_full_report=False)), settings
    )
    empty = controller.snapshot()
    assert empty["output"] is None
    assert empty["outline"] == []

    controller.submit("topic")
    snap = controller.snapshot()
    assert snap["output"] == {"title": "", "content": "# T\n\nbody", "isFullReport": False}
    assert snap["label"] == "Surgical Revision"
    assert snap["display_title"] == "Untitled Document"
    assert snap["outline"] == [{"id": "section-0", "text": "T", "level": 1}]
    assert [b["kind"] for b in snap["blocks"]] == ["heading", "break", "paragraph"]


def test_factory_failure_is_reported(settings: Settings) -> None:
    """It should turn a failing session factory into the generic error message."""

    def broken_factory() -> EngineSession:
        raise RuntimeError("boom")

    controller = DraftingController(SessionProvider(broken_factory), settings)

    assert controller.submit("topic") is True
    assert controller.state.error == "Connection Interrupted."
    assert controller.state.is_processing is False
    assert controller.state.output is None


def test_unexpected_send_failure_keeps_output(settings: Settings) -> None:
    """It should keep the previous document when a turn fails outside the engine errors."""

    class FlakySession(EngineSession):
        def send(self, message: str) -> DocumentOutput:
            if self.turn_count:
                raise KeyError(message)
            return super().send(message)

    backend = ScriptedBackend(reply("T", "# T"))
    provider = SessionProvider(lambda: FlakySession(backend, system_instruction="sys"))
    controller = DraftingController(provider, settings)
    controller.submit("topic")
    before = controller.state.output

    assert controller.submit("revise") is True
    assert controller.state.error == "Connection Interrupted."
    assert controller.state.output is before
    assert controller.state.is_processing is False
