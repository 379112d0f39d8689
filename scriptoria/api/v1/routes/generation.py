from __future__ import annotations

import logging

from fastapi import APIRouter

from scriptoria.agents.base import AgentContext
from scriptoria.agents.blueprint import BlueprintAgent
from scriptoria.agents.continuation import ContinuationAgent
from scriptoria.api.deps import LLMDep, SettingsDep
from scriptoria.config import Settings
from scriptoria.schemas.blueprint import (
    BlueprintRequest,
    BlueprintResponse,
    ContinuationRequest,
    ContinuationResponse,
    ErrorResponse,
)
from scriptoria.services.llm import LLMService

router = APIRouter()
logger = logging.getLogger(__name__)

_ERROR_RESPONSES = {
    402: {"model": ErrorResponse, "description": "AI credits exhausted"},
    429: {"model": ErrorResponse, "description": "Rate limited by the AI gateway"},
    500: {"model": ErrorResponse, "description": "Configuration or gateway failure"},
}


@router.post(
    "/generate-blueprint",
    response_model=BlueprintResponse,
    responses=_ERROR_RESPONSES,
)
async def generate_blueprint(
    payload: BlueprintRequest,
    settings: Settings = SettingsDep,
    llm: LLMService = LLMDep,
):
    """Generate the 14-section film blueprint for a film concept."""
    ctx = AgentContext(settings=settings, llm=llm)
    return await BlueprintAgent().run(ctx, payload)


@router.post(
    "/continue-story",
    response_model=ContinuationResponse,
    responses={400: {"model": ErrorResponse, "description": "Story content is required"}, **_ERROR_RESPONSES},
)
async def continue_story(
    payload: ContinuationRequest,
    settings: Settings = SettingsDep,
    llm: LLMService = LLMDep,
):
    """Continue an existing story, optionally toward a given direction."""
    ctx = AgentContext(settings=settings, llm=llm)
    return await ContinuationAgent().run(ctx, payload)
