"""Application errors rendered as ``{"error": message}`` responses."""
from __future__ import annotations

from typing import Any


class AppException(Exception):
    status_code: int = 500
    code: str = "INTERNAL_ERROR"

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        if code is not None:
            self.code = code
        self.details = details or {}


class ConfigurationError(AppException):
    """Required configuration (the gateway secret) is missing."""

    status_code = 500
    code = "CONFIGURATION_ERROR"


class InvalidRequestError(AppException):
    status_code = 400
    code = "INVALID_REQUEST"


class RateLimitedError(AppException):
    status_code = 429
    code = "RATE_LIMITED"

    def __init__(self, message: str = "Rate limit exceeded. Please try again later.", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


class CreditsExhaustedError(AppException):
    status_code = 402
    code = "CREDITS_EXHAUSTED"

    def __init__(
        self, message: str = "AI credits exhausted. Please add funds to continue.", **kwargs: Any
    ) -> None:
        super().__init__(message, **kwargs)


class GatewayError(AppException):
    """Any other upstream failure: non-success status or transport error."""

    status_code = 500
    code = "GATEWAY_ERROR"
