from __future__ import annotations

import logging

from scriptoria.agents.base import AgentContext, BaseAgent
from scriptoria.agents.prompts.blueprint import FIELD_DEFAULTS, SYSTEM_PROMPT, USER_PROMPT_TEMPLATE
from scriptoria.agents.utils import parse_sections
from scriptoria.schemas.blueprint import BlueprintRequest, BlueprintResponse, Budget

logger = logging.getLogger(__name__)


def build_user_prompt(request: BlueprintRequest) -> str:
    """Fill the blueprint template, substituting defaults for blank fields."""
    values = {
        field: getattr(request, field) or default for field, default in FIELD_DEFAULTS.items()
    }
    return USER_PROMPT_TEMPLATE.format(budget_label=Budget.label_for(request.budget), **values)


class BlueprintAgent(BaseAgent):
    """Generates the 14-section film blueprint from a film concept form."""

    name = "blueprint"

    async def run(self, ctx: AgentContext, request: BlueprintRequest) -> BlueprintResponse:
        """Call the gateway once and split the reply into blueprint sections.

        Returns:
            The parsed blueprint plus the keys a partial parse left empty
            (empty when every section was found or the whole-text fallback applied)
        """
        logger.info("Generating blueprint with AI gateway...")
        resp = await self.call_llm(ctx, system_prompt=SYSTEM_PROMPT, user_prompt=build_user_prompt(request))

        blueprint, fell_back = parse_sections(resp.text)
        missing: list[str] = []
        if fell_back:
            logger.warning("No blueprint headings recognised, returning the whole reply as the story")
        else:
            missing = blueprint.missing_sections()
            if missing:
                logger.warning(f"Blueprint parsed partially, missing sections: {', '.join(missing)}")

        logger.info("Blueprint generated successfully")
        return BlueprintResponse(blueprint=blueprint, missing_sections=missing)
