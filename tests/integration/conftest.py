"""Integration test configuration and fixtures."""
import pytest
from unittest.mock import Mock
from fastapi.testclient import TestClient

from ilo.api.enhance import get_enhancement_service
from ilo.prompts.templates import DEFAULT_ENHANCEMENT_SYSTEM_PROMPT, build_enhancement_template
from ilo.services.enhancement_service import EnhancementService
from main import app


@pytest.fixture
def mock_llm():
    """LLM service double; tests set `chat.return_value` / `side_effect`."""
    return Mock()


@pytest.fixture
def client(mock_llm):
    """HTTP test client with the real EnhancementService over a mocked LLM."""
    service = EnhancementService(
        llm_service=mock_llm,
        system_prompt=DEFAULT_ENHANCEMENT_SYSTEM_PROMPT,
        user_template=build_enhancement_template(),
    )
    app.dependency_overrides[get_enhancement_service] = lambda: service
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()
