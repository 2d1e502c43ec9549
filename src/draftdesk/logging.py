"""Logging utilities.

Records carry the drafting session, the turn number within it and the writing mode of that turn
(`genesis` for the first turn, `surgical_edit` afterwards).
"""

from __future__ import annotations

import contextlib
import contextvars
import logging
from typing import Any

from rich.logging import RichHandler


_session_id_var: contextvars.ContextVar[str] = contextvars.ContextVar(
    "draftdesk_session_id", default="-"
)
_turn_var: contextvars.ContextVar[str] = contextvars.ContextVar("draftdesk_turn", default="-")
_mode_var: contextvars.ContextVar[str] = contextvars.ContextVar("draftdesk_mode", default="-")


def current_context() -> dict[str, str]:
    """Return the session context bound to the current execution context."""

    return {
        "session": _session_id_var.get(),
        "turn": _turn_var.get(),
        "mode": _mode_var.get(),
    }


class _ContextFilter(logging.Filter):
    """Inject session context into log records."""

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: A003
        for key, value in current_context().items():
            setattr(record, key, value)
        return True


@contextlib.contextmanager
def session_context(
    *,
    session_id: str,
    turn: int | str | None = None,
    mode: str | None = None,
) -> Any:
    """Temporarily bind session context for structured logging.

    Args:
        session_id: Drafting session identifier.
        turn: Optional turn number within the session.
        mode: Optional writing mode of the turn.
    """

    token_session = _session_id_var.set(session_id)
    token_turn = _turn_var.set(str(turn) if turn is not None else _turn_var.get())
    token_mode = _mode_var.set(mode or _mode_var.get())
    try:
        yield
    finally:
        _session_id_var.reset(token_session)
        _turn_var.reset(token_turn)
        _mode_var.reset(token_mode)


def configure_logging(level: str = "INFO") -> None:
    """Configure application logging.

    Args:
        level: Logging level name.
    """

    handler = RichHandler(rich_tracebacks=True, show_time=True, show_level=True)
    handler.addFilter(_ContextFilter())

    formatter = logging.Formatter(
        fmt=(
            "%(asctime)s %(levelname)s session=%(session)s turn=%(turn)s mode=%(mode)s "
            "%(name)s: %(message)s"
        ),
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(level)
    # Avoid duplicate handlers if configure_logging is called multiple times
    if not any(isinstance(h, RichHandler) for h in root.handlers):
        root.addHandler(handler)
    else:
        for h in root.handlers:
            if isinstance(h, RichHandler):
                h.addFilter(_ContextFilter())
                h.setFormatter(formatter)


def get_logger(name: str) -> logging.Logger:
    """Get a module logger."""

    return logging.getLogger(name)


def log_exception(logger: logging.Logger, msg: str, **context: Any) -> None:
    """Log an exception with optional structured context."""

    if context:
        logger.exception("%s | context=%s", msg, context)
    else:
        logger.exception("%s", msg)
