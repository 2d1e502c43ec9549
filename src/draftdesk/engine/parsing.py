"""Reply parsing.

A turn's reply is only accepted when it validates as a whole against
:class:`~draftdesk.models.DocumentOutput`; nothing partial ever reaches the caller.
"""

from __future__ import annotations

import re

from pydantic import ValidationError

from draftdesk.errors import EmptyResponse, MalformedResponse
from draftdesk.logging import get_logger
from draftdesk.models import DocumentOutput

logger = get_logger(__name__)

_FENCE_RE = re.compile(r"^```(?:json)?\s*\n?(?P<body>.*?)\n?```$", re.DOTALL | re.IGNORECASE)


def strip_code_fence(text: str) -> str:
    """Return the body of a single surrounding markdown code fence, if there is one."""

    cleaned = text.strip()
    m = _FENCE_RE.match(cleaned)
    if m:
        return m.group("body").strip()
    return cleaned


def parse_document_output(text: str | None) -> DocumentOutput:
    """Parse reply text into a document output.

    Args:
        text: Raw reply text from the generation service.

    Returns:
        The validated document output.

    Raises:
        EmptyResponse: No reply text.
        MalformedResponse: The text is not a JSON object with `title` (string), `content`
            (string) and `isFullReport` (boolean).
    """

    if text is None or not text.strip():
        raise EmptyResponse()

    body = strip_code_fence(text)
    try:
        # Replies must use the wire key `isFullReport`, never the Python field name
        return DocumentOutput.model_validate_json(body, by_alias=True, by_name=False)
    except ValidationError as exc:
        logger.debug("Reply failed validation: %s", exc.errors(include_url=False))
        raise MalformedResponse(
            f"Reply does not match the document output shape ({exc.error_count()} errors)",
            raw_text=text,
        ) from exc
