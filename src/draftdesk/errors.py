"""Errors raised while running a drafting turn."""

from __future__ import annotations


class EngineError(Exception):
    """Base class for failed drafting turns."""


class EmptyResponse(EngineError):
    """The generation service returned no text."""

    def __init__(self, message: str = "No response text generated") -> None:
        super().__init__(message)


class MalformedResponse(EngineError):
    """The reply text does not match the document output shape."""

    def __init__(self, message: str, *, raw_text: str | None = None) -> None:
        super().__init__(message)
        self.raw_text = raw_text


class ServiceError(EngineError):
    """Transport, quota or auth failure reported by the generation service."""

    def __init__(self, cause: BaseException) -> None:
        super().__init__(f"Generation service failed: {cause}")
        self.cause = cause


class SessionBusy(EngineError):
    """A turn was sent while another turn on the same session was in flight."""
