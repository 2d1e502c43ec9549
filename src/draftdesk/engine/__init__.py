"""Session client for the generation service."""

from __future__ import annotations

from draftdesk.engine.parsing import parse_document_output
from draftdesk.engine.session import (
    EngineSession,
    SessionProvider,
    create_engine_session,
    default_session_factory,
)

__all__ = [
    "EngineSession",
    "SessionProvider",
    "create_engine_session",
    "default_session_factory",
    "parse_document_output",
]
