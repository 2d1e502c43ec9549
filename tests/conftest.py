from __future__ import annotations

import pytest

from draftdesk.config import Settings


@pytest.fixture
def settings() -> Settings:
    return Settings(openai_api_key="test-key", log_level="DEBUG")
