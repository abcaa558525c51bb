from __future__ import annotations

import pytest

from gkhub import config, prompts
from gkhub.models import MODE_STUDY_FLASH, MODE_STUDY_PRO, MODE_TEST


@pytest.mark.parametrize(
    "mode, model, use_search",
    [
        (MODE_TEST, config.FLASH_MODEL, True),
        (MODE_STUDY_FLASH, config.FLASH_MODEL, False),
        (MODE_STUDY_PRO, config.PRO_MODEL, True),
    ],
)
def test_research_request_settings_per_mode(mode, model, use_search):
    request = prompts.build_research_request("Dandi March", mode)

    assert request.model_name == model
    assert request.use_search is use_search
    assert request.response_schema is prompts.RESEARCH_SCHEMA
    assert '"Dandi March"' in request.prompt
    assert "Gujarati" in request.prompt


def test_test_mode_asks_for_thirty_questions():
    request = prompts.build_research_request("IPC", MODE_TEST)

    assert f"{config.TEST_QUESTION_COUNT} MCQs" in request.prompt


def test_unknown_mode_is_rejected():
    with pytest.raises(ValueError):
        prompts.build_research_request("IPC", "quiz")


def test_more_request_for_tests_only_lists_last_fifty_questions():
    questions = [f"Question {i}" for i in range(60)]

    request = prompts.build_more_request("IPC", MODE_TEST, questions)

    assert request.response_schema is prompts.EXTENSION_SCHEMA
    assert request.use_search is True
    assert "Question 9\n" not in request.prompt
    assert "Question 10\n- Question 11" in request.prompt
    assert f"Generate {config.MORE_QUESTION_COUNT} NEW MCQs" in request.prompt


def test_more_request_for_study_keeps_last_thousand_characters():
    context = ["A" * 500 + "B" * 1000]

    request = prompts.build_more_request("IPC", MODE_STUDY_PRO, context)

    assert request.model_name == config.PRO_MODEL
    assert request.use_search is False
    assert "A" * 10 not in request.prompt
    assert '"...' + "B" * 1000 + '"' in request.prompt


def test_more_request_for_flash_study_uses_flash_model():
    request = prompts.build_more_request("IPC", MODE_STUDY_FLASH, [])

    assert request.model_name == config.FLASH_MODEL
    assert 'Previous Context: "..."' in request.prompt


@pytest.mark.parametrize(
    "mode, budget",
    [
        (MODE_TEST, None),
        (MODE_STUDY_FLASH, config.FLASH_THINKING_BUDGET),
        (MODE_STUDY_PRO, config.PRO_THINKING_BUDGET),
    ],
)
def test_research_request_thinking_budget(mode, budget):
    assert prompts.build_research_request("IPC", mode).thinking_budget == budget


@pytest.mark.parametrize(
    "mode, budget",
    [
        (MODE_TEST, None),
        (MODE_STUDY_FLASH, config.MORE_FLASH_THINKING_BUDGET),
        (MODE_STUDY_PRO, config.PRO_THINKING_BUDGET),
    ],
)
def test_more_request_thinking_budget(mode, budget):
    assert prompts.build_more_request("IPC", mode, ["context"]).thinking_budget == budget


def test_thinking_budget_values():
    assert (config.FLASH_THINKING_BUDGET, config.PRO_THINKING_BUDGET, config.MORE_FLASH_THINKING_BUDGET) == (1024, 32768, 2048)
