"""
Integration tests for the assembled application.

Runs the wizard end to end against the real FastAPI app: the wizard's
httpx client is routed into the app through httpx.ASGITransport, and only
the upstream LLM is mocked.
"""
import httpx
import pytest

from ilo.models import EnhancementStatus
from ilo.services.enhancement_client import EnhancementClient, EnhancementClientConfig
from ilo.services.wizard import WizardController
from main import app
from shared.services.llm_service import LLMServiceError


@pytest.mark.integration
@pytest.mark.smoke
def test_root_health_check(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"


@pytest.mark.integration
def test_enhance_ilo_success(client, mock_llm, sample_enhancement_text):
    mock_llm.chat.return_value = sample_enhancement_text

    response = client.post("/enhance-ilo", json={"ilo": "By the end of this tutorial, students will be able to x."})

    assert response.status_code == 200
    assert response.json() == {"enhancedILO": sample_enhancement_text}
    system_prompt, user_prompt = mock_llm.chat.call_args.args
    assert "ABCD" in system_prompt
    assert "students will be able to x." in user_prompt


@pytest.mark.integration
@pytest.mark.parametrize("body", [{}, {"ilo": ""}, {"ilo": "   "}, {"ilo": None}])
def test_enhance_ilo_missing_input(client, mock_llm, body):
    response = client.post("/enhance-ilo", json=body)

    assert response.status_code == 400
    assert response.json() == {
        "error": "No ILO provided",
        "details": "The request body must include a non-empty 'ilo' field",
        "code": "ILO_MISSING",
    }
    mock_llm.chat.assert_not_called()


@pytest.mark.integration
@pytest.mark.parametrize(
    "kwargs",
    [
        {"content": "not json", "headers": {"Content-Type": "application/json"}},
        {"json": {"ilo": 123}},
        {"json": ["x"]},
    ],
)
def test_enhance_ilo_malformed_body(client, mock_llm, kwargs):
    response = client.post("/enhance-ilo", **kwargs)

    assert response.status_code == 400
    assert response.json() == {
        "error": "Invalid request",
        "details": "The request body must be a JSON object with a string 'ilo' field",
        "code": "INVALID_REQUEST",
    }
    mock_llm.chat.assert_not_called()


@pytest.mark.integration
def test_enhance_ilo_upstream_failure_has_no_stack(client, mock_llm):
    mock_llm.chat.side_effect = LLMServiceError("gpt-4o-mini API error: 500")

    response = client.post("/enhance-ilo", json={"ilo": "x"})

    assert response.status_code == 502
    data = response.json()
    assert data["code"] == "UPSTREAM_ERROR"
    assert "stack" not in data


@pytest.mark.integration
def test_unexpected_error_is_opaque(client, mock_llm):
    mock_llm.chat.side_effect = KeyError("secret internals")

    response = client.post("/enhance-ilo", json={"ilo": "x"})

    assert response.status_code == 500
    assert response.json()["code"] == "INTERNAL_ERROR"
    assert "secret internals" not in response.text


# ---------------------------------------------------------------------------
# Wizard → API round trip
# ---------------------------------------------------------------------------

def _wizard_for_app():
    http_client = httpx.AsyncClient(transport=httpx.ASGITransport(app=app))
    config = EnhancementClientConfig(base_url="http://testserver")
    return WizardController(EnhancementClient(config, http_client=http_client))


@pytest.mark.integration
@pytest.mark.asyncio
async def test_wizard_round_trip(client, mock_llm, sample_enhancement_text):
    mock_llm.chat.return_value = sample_enhancement_text
    wizard = _wizard_for_app()

    wizard.set_field("audience", "MATH1012 students")
    wizard.next()
    wizard.set_field("behavior.level", "Applying")
    wizard.set_field("behavior.verbAndTask", "compute limits of complex functions")
    wizard.next()
    wizard.set_field("condition", "given a set of practice problems and a formula sheet")
    wizard.next()
    wizard.set_field("degree", "with at least 80% accuracy in their solutions")
    wizard.next()
    assert wizard.is_review_step

    sections = await wizard.enhance()
    await wizard.enhance()

    assert [s.title for s in sections][1] == "2. Enhanced ILO"
    assert wizard.has_requested_enhancement is True
    assert mock_llm.chat.call_count == 1
    sent = mock_llm.chat.call_args.args[1]
    assert wizard.sentence in sent


@pytest.mark.integration
@pytest.mark.asyncio
async def test_wizard_retry_after_upstream_failure(client, mock_llm, sample_enhancement_text):
    mock_llm.chat.side_effect = [LLMServiceError("down"), sample_enhancement_text]
    wizard = _wizard_for_app()
    wizard.set_field("audience", "CHEM1010 students")
    wizard.jump(4)

    assert await wizard.enhance() == []
    assert wizard.enhancement_status == EnhancementStatus.FAILED

    sections = await wizard.enhance()
    assert len(sections) == 4
    assert wizard.enhancement_status == EnhancementStatus.SUCCEEDED
    assert mock_llm.chat.call_count == 2
