from __future__ import annotations

import pytest

from scriptoria.agents.continuation import ContinuationAgent, build_user_prompt
from scriptoria.agents.prompts.continuation import CONTINUE_NATURALLY
from scriptoria.exceptions import InvalidRequestError
from scriptoria.schemas.blueprint import ContinuationRequest
from tests.agent_fixtures import FakeLLM, make_context


def test_prompt_without_direction_continues_naturally():
    prompt = build_user_prompt("The door creaked open.")
    assert CONTINUE_NATURALLY in prompt
    assert "(4 words)" in prompt
    assert "---\nThe door creaked open.\n---" in prompt


def test_prompt_with_direction():
    prompt = build_user_prompt("The door creaked open.", "  a ghost appears ")
    assert 'move in this direction: "a ghost appears"' in prompt
    assert CONTINUE_NATURALLY not in prompt


def test_blank_direction_is_ignored():
    prompt = build_user_prompt("The door creaked open.", "   ")
    assert CONTINUE_NATURALLY in prompt


@pytest.mark.asyncio
@pytest.mark.parametrize("story", [None, "", "   \n\t"])
async def test_empty_story_is_rejected(test_settings, story):
    llm = FakeLLM("unused")
    ctx = make_context(test_settings, llm=llm)

    with pytest.raises(InvalidRequestError, match="Story content is required") as exc_info:
        await ContinuationAgent().run(ctx, ContinuationRequest(existingStory=story))

    assert exc_info.value.status_code == 400
    assert llm.calls == []


@pytest.mark.asyncio
async def test_continuation_returns_raw_text(test_settings):
    reply = "## Analysis\nMoody.\n## Next Steps\nKeep going."
    llm = FakeLLM(reply)
    ctx = make_context(test_settings, llm=llm)

    result = await ContinuationAgent().run(ctx, ContinuationRequest(existingStory="Once upon a time."))

    assert result.continuation == reply
