"""
Unit tests for EnhancementClient.

The backend is replaced by an httpx.MockTransport so the wire contract
(path, body shape, error mapping) is exercised without a server.
"""
import json

import httpx
import pytest

from ilo.exceptions import EnhancementRequestError, EnhancementResponseError
from ilo.services.enhancement_client import EnhancementClient, EnhancementClientConfig


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def make_client(handler, **config_overrides):
    config = EnhancementClientConfig(base_url="http://backend.test", **config_overrides)
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return EnhancementClient(config, http_client=http_client)


# ---------------------------------------------------------------------------
# Config
# ---------------------------------------------------------------------------

class TestEnhancementClientConfig:
    def test_defaults(self):
        config = EnhancementClientConfig()
        assert config.endpoint_path == "/enhance-ilo"
        assert config.timeout_seconds == 60.0

    def test_url_joins_base_and_path(self):
        client = EnhancementClient(EnhancementClientConfig(base_url="http://host:3001/"))
        assert client.url == "http://host:3001/enhance-ilo"


# ---------------------------------------------------------------------------
# enhance, happy path
# ---------------------------------------------------------------------------

class TestEnhanceSuccess:
    @pytest.mark.asyncio
    async def test_posts_sentence_and_parses_sections(self):
        captured = {}

        def handler(request: httpx.Request) -> httpx.Response:
            captured["method"] = request.method
            captured["url"] = str(request.url)
            captured["body"] = json.loads(request.content)
            return httpx.Response(200, json={"enhancedILO": "### Feedback\nGood start.\n### Enhanced ILO\nBetter version."})

        client = make_client(handler)
        sections = await client.enhance("By the end of this tutorial, students will be able to x.")

        assert captured["method"] == "POST"
        assert captured["url"] == "http://backend.test/enhance-ilo"
        assert captured["body"] == {"ilo": "By the end of this tutorial, students will be able to x."}
        assert [(s.title, s.content) for s in sections] == [
            ("Feedback", "Good start."),
            ("Enhanced ILO", "Better version."),
        ]

    @pytest.mark.asyncio
    async def test_reply_without_headings_is_one_section(self):
        client = make_client(lambda request: httpx.Response(200, json={"enhancedILO": "Plain feedback."}))
        sections = await client.enhance("x")
        assert len(sections) == 1
        assert sections[0].title == ""
        assert sections[0].content == "Plain feedback."


# ---------------------------------------------------------------------------
# enhance, failures
# ---------------------------------------------------------------------------

class TestEnhanceFailures:
    @pytest.mark.asyncio
    async def test_server_error_carries_status_and_code(self):
        def handler(request):
            return httpx.Response(502, json={"error": "x", "details": "y", "code": "UPSTREAM_ERROR"})

        with pytest.raises(EnhancementRequestError) as exc_info:
            await make_client(handler).enhance("x")
        assert exc_info.value.status_code == 502
        assert exc_info.value.error_code == "UPSTREAM_ERROR"

    @pytest.mark.asyncio
    async def test_error_without_json_body(self):
        with pytest.raises(EnhancementRequestError) as exc_info:
            await make_client(lambda request: httpx.Response(500, text="oops")).enhance("x")
        assert exc_info.value.status_code == 500
        assert exc_info.value.error_code is None

    @pytest.mark.asyncio
    async def test_transport_error(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(EnhancementRequestError) as exc_info:
            await make_client(handler).enhance("x")
        assert exc_info.value.status_code is None

    @pytest.mark.asyncio
    async def test_timeout(self):
        def handler(request):
            raise httpx.ReadTimeout("slow", request=request)

        with pytest.raises(EnhancementRequestError, match="timed out"):
            await make_client(handler, timeout_seconds=5).enhance("x")

    @pytest.mark.asyncio
    async def test_missing_key(self):
        client = make_client(lambda request: httpx.Response(200, json={"other": "x"}))
        with pytest.raises(EnhancementResponseError):
            await client.enhance("x")

    @pytest.mark.asyncio
    async def test_non_json_success(self):
        client = make_client(lambda request: httpx.Response(200, text="not json"))
        with pytest.raises(EnhancementResponseError):
            await client.enhance("x")

    @pytest.mark.asyncio
    async def test_non_string_payload(self):
        client = make_client(lambda request: httpx.Response(200, json={"enhancedILO": 42}))
        with pytest.raises(EnhancementResponseError):
            await client.enhance("x")
