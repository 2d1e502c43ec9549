from __future__ import annotations

from draftdesk.prompts.engine import (
    DOCUMENT_OUTPUT_SCHEMA,
    ENGINE_SYSTEM_PROMPT_TEMPLATE,
    build_engine_system_prompt,
)

__all__ = [
    "DOCUMENT_OUTPUT_SCHEMA",
    "ENGINE_SYSTEM_PROMPT_TEMPLATE",
    "build_engine_system_prompt",
]
