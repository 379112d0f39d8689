from __future__ import annotations

import logging

from scriptoria.agents.base import AgentContext, BaseAgent
from scriptoria.agents.prompts.continuation import (
    CONTINUE_NATURALLY,
    DIRECTION_TEMPLATE,
    SYSTEM_PROMPT,
    USER_PROMPT_TEMPLATE,
)
from scriptoria.agents.utils import count_words
from scriptoria.exceptions import InvalidRequestError
from scriptoria.schemas.blueprint import ContinuationRequest, ContinuationResponse

logger = logging.getLogger(__name__)


def build_user_prompt(story: str, direction: str | None = None) -> str:
    """Embed the story, its word count and the direction (or a continue-naturally cue)."""
    if direction and direction.strip():
        instruction = DIRECTION_TEMPLATE.format(direction=direction.strip())
    else:
        instruction = CONTINUE_NATURALLY
    return USER_PROMPT_TEMPLATE.format(
        word_count=count_words(story),
        story=story,
        instruction=instruction,
    )


class ContinuationAgent(BaseAgent):
    """Extends an existing story excerpt; the reply is returned as one block."""

    name = "continuation"

    async def run(self, ctx: AgentContext, request: ContinuationRequest) -> ContinuationResponse:
        """Reject blank stories with a 400, otherwise call the gateway once."""
        story = request.existing_story
        if not story or not story.strip():
            raise InvalidRequestError("Story content is required")

        logger.info("Generating story continuation with AI gateway...")
        resp = await self.call_llm(
            ctx,
            system_prompt=SYSTEM_PROMPT,
            user_prompt=build_user_prompt(story, request.direction),
        )
        logger.info("Story continuation generated successfully")
        # Shown as one block in the UI, so the text is returned unparsed.
        return ContinuationResponse(continuation=resp.text)
