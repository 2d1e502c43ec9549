"""OpenAI-compatible LLM client.

This wraps the `openai` Python SDK and provides a minimal interface for chat completions with an
optional JSON-schema constrained reply.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal, Mapping, Protocol, Sequence

from openai import OpenAI

from draftdesk.config import Settings
from draftdesk.logging import get_logger

logger = get_logger(__name__)

Role = Literal["system", "user", "assistant"]


@dataclass(frozen=True)
class ChatMessage:
    """A chat message."""

    role: Role
    content: str


class ChatBackend(Protocol):
    """Anything that can turn a message list into reply text."""

    def complete(
        self,
        messages: Sequence[ChatMessage],
        *,
        temperature: float = ...,
        response_schema: Mapping[str, Any] | None = ...,
    ) -> str: ...


class LLMClient:
    """LLM client using OpenAI-compatible Chat Completions API."""

    def __init__(self, settings: Settings) -> None:
        self._settings = settings
        if not settings.openai_api_key:
            raise ValueError(
                "Missing DRAFTDESK_OPENAI_API_KEY. "
                "Set it in environment variables or a .env file."
            )

        self._client = OpenAI(api_key=settings.openai_api_key, base_url=settings.openai_base_url)

    def complete(
        self,
        messages: Sequence[ChatMessage],
        *,
        temperature: float = 0.2,
        response_schema: Mapping[str, Any] | None = None,
    ) -> str:
        """Generate a completion.

        Args:
            messages: Chat messages.
            temperature: Sampling temperature.
            response_schema: Optional JSON schema the reply must follow.

        Returns:
            Assistant message content, or an empty string when the model produced none.
        """

        payload: list[dict[str, str]] = [{"role": m.role, "content": m.content} for m in messages]
        extra: dict[str, Any] = {}
        if response_schema is not None:
            extra["response_format"] = {
                "type": "json_schema",
                "json_schema": {
                    "name": "document_output",
                    "schema": dict(response_schema),
                    "strict": True,
                },
            }
        logger.debug("Chat completion requested", extra={"messages": len(payload)})
        resp = self._client.chat.completions.create(
            model=self._settings.openai_model,
            messages=payload,
            temperature=temperature,
            timeout=self._settings.openai_timeout_s,
            **extra,
        )
        if not resp.choices:
            return ""
        choice = resp.choices[0]
        if not choice.message or choice.message.content is None:
            return ""
        return choice.message.content
