from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from scriptoria.config import Settings
from scriptoria.services.llm import LLMResponse, LLMService

logger = logging.getLogger(__name__)


@dataclass
class AgentContext:
    settings: Settings
    llm: LLMService


class BaseAgent:
    name: str = "base"

    async def call_llm(
        self,
        ctx: AgentContext,
        system_prompt: str,
        user_prompt: str,
        **kwargs: Any,
    ) -> LLMResponse:
        """Send one system + user exchange to the gateway and return the reply."""
        messages: list[dict[str, Any]] = [{"role": "user", "content": user_prompt}]
        logger.info(f"[{self.name}] calling AI gateway (model={ctx.settings.ai_gateway_model})")
        return await ctx.llm.generate(messages=messages, system=system_prompt, **kwargs)

    async def run(self, ctx: AgentContext, request: Any) -> Any:  # pragma: no cover
        raise NotImplementedError
