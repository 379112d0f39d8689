"""Async client for the Scriptoria HTTP API."""
from __future__ import annotations

import logging
from typing import Any

import httpx

from scriptoria.schemas.blueprint import BlueprintRequest, FilmBlueprint

logger = logging.getLogger(__name__)


class ScriptoriaClientError(RuntimeError):
    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class ScriptoriaClient:
    """Calls the blueprint and continuation endpoints.

    Server-side failures are raised as ScriptoriaClientError carrying the
    server's ``error`` message.
    """

    def __init__(
        self,
        base_url: str,
        *,
        api_prefix: str = "/api/v1",
        timeout: float = 120.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.api_prefix = api_prefix
        self.timeout = timeout
        self._transport = transport

    async def _post(self, path: str, payload: dict[str, Any], fallback_error: str) -> dict[str, Any]:
        async with httpx.AsyncClient(
            base_url=self.base_url, timeout=self.timeout, transport=self._transport
        ) as client:
            try:
                res = await client.post(f"{self.api_prefix}{path}", json=payload)
            except httpx.HTTPError as exc:
                logger.error(f"Request to {path} failed: {exc!r}")
                raise ScriptoriaClientError(fallback_error) from exc

        try:
            data = res.json()
        except ValueError:
            data = {}
        if not isinstance(data, dict):
            data = {}

        if not res.is_success or data.get("error"):
            message = data.get("error") or fallback_error
            raise ScriptoriaClientError(str(message), status_code=res.status_code)
        return data

    async def generate_blueprint(self, form: BlueprintRequest | dict[str, Any]) -> FilmBlueprint:
        if isinstance(form, dict):
            form = BlueprintRequest.model_validate(form)
        data = await self._post(
            "/generate-blueprint",
            form.model_dump(by_alias=True),
            "Failed to generate blueprint",
        )
        return FilmBlueprint.model_validate(data.get("blueprint") or {})

    async def continue_story(self, existing_story: str, direction: str | None = None) -> str:
        data = await self._post(
            "/continue-story",
            {"existingStory": existing_story, "direction": direction},
            "Failed to continue story",
        )
        return str(data.get("continuation") or "")
