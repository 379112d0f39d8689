from __future__ import annotations

import json
from typing import Any

import httpx
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from scriptoria.api.deps import get_app_settings, get_llm_service
from scriptoria.config import Settings
from scriptoria.main import create_app
from scriptoria.services.llm import LLMService


@pytest.fixture()
def test_settings() -> Settings:
    return Settings(
        ai_gateway_api_key="test-key",
        ai_gateway_base_url="http://gateway.test/v1",
        environment="test",
    )


class StubGateway:
    """Records outbound chat-completion requests and replays a canned reply."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.content = "## Story & Structure\nA tale."
        self.body: Any | None = None

    def reply(self, content: str) -> None:
        self.status_code = 200
        self.content = content
        self.body = None

    def fail(self, status_code: int, text: str = "upstream failure") -> None:
        self.status_code = status_code
        self.body = {"message": text}

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.body is not None:
            return httpx.Response(self.status_code, json=self.body)
        return httpx.Response(
            self.status_code,
            json={"choices": [{"message": {"role": "assistant", "content": self.content}}]},
        )

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    @property
    def last_payload(self) -> dict[str, Any]:
        return json.loads(self.requests[-1].content)


@pytest.fixture()
def gateway() -> StubGateway:
    return StubGateway()


@pytest.fixture()
def app(test_settings: Settings, gateway: StubGateway):
    app = create_app(test_settings)

    async def override_get_settings() -> Settings:
        return test_settings

    async def override_get_llm() -> LLMService:
        return LLMService(test_settings, transport=gateway.transport())

    app.dependency_overrides[get_app_settings] = override_get_settings
    app.dependency_overrides[get_llm_service] = override_get_llm
    return app


@pytest_asyncio.fixture()
async def async_client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
