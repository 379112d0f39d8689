from __future__ import annotations

from fastapi import Depends

from scriptoria.config import Settings, get_settings
from scriptoria.services.llm import LLMService


async def get_app_settings() -> Settings:
    return get_settings()


async def get_llm_service(settings: Settings = Depends(get_app_settings)) -> LLMService:
    return LLMService(settings)


SettingsDep = Depends(get_app_settings)
LLMDep = Depends(get_llm_service)
