from __future__ import annotations

import json

import httpx
import pytest

from scriptoria.config import Settings
from scriptoria.exceptions import (
    ConfigurationError,
    CreditsExhaustedError,
    GatewayError,
    RateLimitedError,
)
from scriptoria.services.llm import LLMService


def _service(settings: Settings, handler) -> LLMService:
    return LLMService(settings, transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_generate_posts_chat_completion(test_settings):
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"choices": [{"message": {"content": "hello"}}]})

    service = _service(test_settings, handler)
    resp = await service.generate(messages=[{"role": "user", "content": "hi"}], system="be brief")

    assert resp.text == "hello"
    request = seen[0]
    assert str(request.url) == "http://gateway.test/v1/chat/completions"
    assert request.headers["Authorization"] == "Bearer test-key"
    payload = json.loads(request.content)
    assert payload["model"] == "google/gemini-3-flash-preview"
    assert payload["messages"] == [
        {"role": "system", "content": "be brief"},
        {"role": "user", "content": "hi"},
    ]


@pytest.mark.asyncio
async def test_generate_missing_credentials(monkeypatch):
    monkeypatch.delenv("LOVABLE_API_KEY", raising=False)
    monkeypatch.delenv("AI_GATEWAY_API_KEY", raising=False)
    settings = Settings(ai_gateway_api_key=None)

    def handler(request: httpx.Request) -> httpx.Response:  # pragma: no cover
        raise AssertionError("gateway must not be called")

    with pytest.raises(ConfigurationError, match="LOVABLE_API_KEY is not configured"):
        await _service(settings, handler).generate(messages=[])


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("status", "error_type", "message"),
    [
        (429, RateLimitedError, "Rate limit exceeded. Please try again later."),
        (402, CreditsExhaustedError, "AI credits exhausted. Please add funds to continue."),
        (503, GatewayError, "AI gateway error: 503"),
    ],
)
async def test_generate_classifies_upstream_errors(test_settings, status, error_type, message):
    service = _service(test_settings, lambda request: httpx.Response(status, text="nope"))

    with pytest.raises(error_type) as exc_info:
        await service.generate(messages=[{"role": "user", "content": "hi"}])

    assert exc_info.value.message == message


@pytest.mark.asyncio
async def test_generate_transport_failure(test_settings):
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(GatewayError, match="AI gateway request failed"):
        await _service(test_settings, handler).generate(messages=[])


def test_parse_response_without_choices(test_settings):
    service = LLMService(test_settings)
    assert service._parse_response({}).text == ""
    assert service._parse_response({"choices": [{"message": {"content": None}}]}).text == ""


def test_settings_read_gateway_key_from_env(monkeypatch):
    monkeypatch.setenv("LOVABLE_API_KEY", "from-env")
    assert Settings().ai_gateway_api_key == "from-env"
