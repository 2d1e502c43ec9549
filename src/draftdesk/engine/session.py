"""Drafting session with the generation service.

A session is the conversational handle: the fixed system instruction, the required reply shape
and the ordered turn history. Every turn sends the whole history, so the reply to a revision
instruction is a function of (instruction, prior turns, new message). That history is what lets
the model run a surgical edit on the document it produced earlier.
"""

from __future__ import annotations

import threading
import uuid
from typing import Any, Callable, Iterable, Mapping

from draftdesk.config import Settings
from draftdesk.engine.parsing import parse_document_output
from draftdesk.errors import EngineError, ServiceError, SessionBusy
from draftdesk.llm.client import ChatBackend, ChatMessage, LLMClient
from draftdesk.logging import get_logger, session_context
from draftdesk.models import DocumentOutput
from draftdesk.prompts import DOCUMENT_OUTPUT_SCHEMA, build_engine_system_prompt

logger = get_logger(__name__)


class EngineSession:
    """One conversational handle; turns must be sent one at a time."""

    def __init__(
        self,
        backend: ChatBackend,
        *,
        system_instruction: str,
        response_schema: Mapping[str, Any] = DOCUMENT_OUTPUT_SCHEMA,
        temperature: float = 0.4,
        history: Iterable[ChatMessage] = (),
        session_id: str | None = None,
    ) -> None:
        self._backend = backend
        self._system_instruction = system_instruction
        self._response_schema = dict(response_schema)
        self._temperature = temperature
        self._history: list[ChatMessage] = list(history)
        self._lock = threading.Lock()
        self.session_id = session_id or uuid.uuid4().hex[:12]

    @property
    def system_instruction(self) -> str:
        return self._system_instruction

    @property
    def response_schema(self) -> dict[str, Any]:
        return dict(self._response_schema)

    @property
    def history(self) -> tuple[ChatMessage, ...]:
        """Completed turns, oldest first (user and assistant messages alternate)."""

        return tuple(self._history)

    @property
    def turn_count(self) -> int:
        return sum(1 for m in self._history if m.role == "user")

    def send(self, message: str) -> DocumentOutput:
        """Send one turn and return the validated document.

        Args:
            message: Topic (first turn) or revision instruction.

        Returns:
            The parsed document output.

        Raises:
            ValueError: Blank message.
            SessionBusy: Another turn is in flight on this session.
            EmptyResponse: The service returned no text.
            MalformedResponse: The reply does not match the document output shape.
            ServiceError: The service call itself failed.
        """

        if not message or not message.strip():
            raise ValueError("message must not be empty")
        if not self._lock.acquire(blocking=False):
            raise SessionBusy("a turn is already in flight for this session")
        try:
            turn = self.turn_count + 1
            mode = "genesis" if not self._history else "surgical_edit"
            with session_context(session_id=self.session_id, turn=turn, mode=mode):
                return self._send_locked(message)
        finally:
            self._lock.release()

    def _send_locked(self, message: str) -> DocumentOutput:
        user_msg = ChatMessage(role="user", content=message)
        messages = [
            ChatMessage(role="system", content=self._system_instruction),
            *self._history,
            user_msg,
        ]
        logger.info("Sending turn", extra={"history_len": len(self._history)})
        try:
            text = self._backend.complete(
                messages,
                temperature=self._temperature,
                response_schema=self._response_schema,
            )
        except EngineError:
            raise
        except Exception as exc:
            raise ServiceError(exc) from exc

        output = parse_document_output(text)
        # History only grows once the reply is known to be a valid document
        self._history.append(user_msg)
        self._history.append(ChatMessage(role="assistant", content=text))
        logger.info(
            "Turn completed",
            extra={"title": output.title, "content_len": len(output.content)},
        )
        return output


def create_engine_session(
    backend: ChatBackend,
    settings: Settings,
    *,
    history: Iterable[ChatMessage] = (),
) -> EngineSession:
    """Create a session configured with the engine instruction and reply shape."""

    return EngineSession(
        backend,
        system_instruction=build_engine_system_prompt(settings.document_language),
        response_schema=DOCUMENT_OUTPUT_SCHEMA,
        temperature=settings.temperature,
        history=history,
    )


def default_session_factory(settings: Settings) -> Callable[[], EngineSession]:
    """Return a factory building sessions backed by :class:`LLMClient`.

    A missing API key surfaces as a :class:`ServiceError` so callers handle it like any other
    auth failure.
    """

    def _factory() -> EngineSession:
        try:
            backend = LLMClient(settings)
        except ValueError as exc:
            raise ServiceError(exc) from exc
        return create_engine_session(backend, settings)

    return _factory


class SessionProvider:
    """Owns the single session and creates it on first use."""

    def __init__(self, factory: Callable[[], EngineSession]) -> None:
        self._factory = factory
        self._session: EngineSession | None = None
        self._lock = threading.Lock()

    @property
    def initialized(self) -> bool:
        return self._session is not None

    def ensure(self) -> EngineSession:
        """Return the session, creating it if needed.

        Raises:
            ServiceError: The factory failed; the cause is kept on the error.
        """

        with self._lock:
            if self._session is None:
                try:
                    self._session = self._factory()
                except EngineError:
                    raise
                except Exception as exc:
                    raise ServiceError(exc) from exc
                logger.info("Session created", extra={"session_id": self._session.session_id})
            return self._session

    def discard(self) -> None:
        """Drop the session; the next :meth:`ensure` starts a fresh conversation."""

        with self._lock:
            if self._session is not None:
                logger.info("Session discarded", extra={"session_id": self._session.session_id})
            self._session = None
