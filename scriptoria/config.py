from __future__ import annotations

from functools import lru_cache

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Note: do not hardcode env_file here; tests instantiate Settings() directly and
    # should not implicitly read the repo's .env. Runtime uses get_settings().
    model_config = SettingsConfigDict(extra="ignore", populate_by_name=True)

    app_name: str = "scriptoria-backend"
    environment: str = Field(default="dev", description="dev|staging|prod")
    log_level: str = Field(default="INFO", description="Root and uvicorn log level")

    host: str = "0.0.0.0"
    port: int = 8000

    api_v1_prefix: str = "/api/v1"
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])

    # ============================================
    # AI gateway (OpenAI-style chat completions)
    # ============================================
    ai_gateway_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("ai_gateway_api_key", "LOVABLE_API_KEY"),
        description="Bearer token for the AI gateway",
    )
    ai_gateway_base_url: str = Field(
        default="https://ai.gateway.lovable.dev/v1",
        description="AI gateway base URL",
    )
    ai_gateway_endpoint: str = Field(
        default="/chat/completions",
        description="Chat completion endpoint path",
    )
    ai_gateway_model: str = Field(
        default="google/gemini-3-flash-preview",
        description="Model identifier sent with every completion request",
    )

    request_timeout_s: float = 120.0

    @property
    def is_development(self) -> bool:
        return self.environment in {"dev", "development"}

    def ai_gateway_url(self) -> str:
        base = self.ai_gateway_base_url.rstrip("/")
        endpoint = self.ai_gateway_endpoint
        if not endpoint.startswith("/"):
            endpoint = "/" + endpoint
        return f"{base}{endpoint}"

    def ai_gateway_headers(self) -> dict[str, str]:
        """Gateway request headers; the caller checks the key is present."""
        headers: dict[str, str] = {
            "User-Agent": self.app_name,
            "Content-Type": "application/json",
        }
        if self.ai_gateway_api_key:
            headers["Authorization"] = f"Bearer {self.ai_gateway_api_key}"
        return headers


@lru_cache
def get_settings() -> Settings:
    return Settings(_env_file=".env", _env_file_encoding="utf-8")
