from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

import httpx

from scriptoria.config import Settings
from scriptoria.exceptions import (
    ConfigurationError,
    CreditsExhaustedError,
    GatewayError,
    RateLimitedError,
)

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class LLMResponse:
    text: str
    raw: Any


class LLMService:
    """AI gateway wrapper (OpenAI-compatible chat completions).

    - One POST per call, no retries: failures surface immediately
    - 429 / 402 are mapped to dedicated errors, everything else to GatewayError
    """

    def __init__(self, settings: Settings, *, transport: httpx.AsyncBaseTransport | None = None):
        self.settings = settings
        self._transport = transport

    def _headers(self) -> dict[str, str]:
        if not self.settings.ai_gateway_api_key:
            raise ConfigurationError("LOVABLE_API_KEY is not configured")
        return self.settings.ai_gateway_headers()

    def _parse_response(self, data: dict[str, Any]) -> LLMResponse:
        choices = data.get("choices") or []
        content = ""
        if choices and isinstance(choices[0], dict):
            message = choices[0].get("message") or {}
            content = message.get("content") or ""
        return LLMResponse(text=str(content), raw=data)

    def _raise_for_status(self, res: httpx.Response) -> None:
        if res.status_code == 429:
            logger.warning("AI gateway rate limited the request")
            raise RateLimitedError()
        if res.status_code == 402:
            logger.warning("AI gateway reports exhausted credits")
            raise CreditsExhaustedError()
        if not res.is_success:
            logger.error(f"AI gateway error: {res.status_code} {res.text[:500]}")
            raise GatewayError(
                f"AI gateway error: {res.status_code}",
                details={"upstream_status": res.status_code},
            )

    async def generate(
        self,
        *,
        messages: list[dict[str, Any]],
        system: str | None = None,
        model: str | None = None,
        **kwargs: Any,
    ) -> LLMResponse:
        headers = self._headers()

        if system is not None:
            messages = [{"role": "system", "content": system}, *messages]
        payload: dict[str, Any] = {
            "model": model or self.settings.ai_gateway_model,
            "messages": messages,
            **kwargs,
        }

        async with httpx.AsyncClient(
            timeout=self.settings.request_timeout_s,
            transport=self._transport,
        ) as client:
            try:
                res = await client.post(self.settings.ai_gateway_url(), headers=headers, json=payload)
            except (httpx.TimeoutException, httpx.NetworkError) as exc:
                logger.error(f"AI gateway request failed: {exc!r}")
                raise GatewayError(f"AI gateway request failed: {exc}") from exc

        self._raise_for_status(res)
        try:
            data = res.json()
        except ValueError as exc:
            raise GatewayError("AI gateway returned an invalid JSON body") from exc
        if not isinstance(data, dict):
            raise GatewayError("AI gateway returned an unexpected response shape")
        return self._parse_response(data)
