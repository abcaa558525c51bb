from __future__ import annotations

import pytest

from gkhub import session
from gkhub.gemini import ContentFetchError
from gkhub.loader import IncrementalLoader
from gkhub.models import (
    MCQ,
    MODE_STUDY_FLASH,
    MODE_STUDY_PRO,
    MODE_TEST,
    PLAN_FREE,
    PLAN_PREMIUM,
    Extension,
    LoadingState,
    ResearchData,
)
from gkhub.store import LocalStateStore


def _mcq(question, correct="A"):
    return MCQ(question=question, options=["w", "x", "y", "z"], correct_answer=correct, explanation="e")


@pytest.fixture
def state():
    state = {}
    session.init_state(state)
    return state


@pytest.fixture
def store(tmp_path):
    return LocalStateStore("profile", data_dir=tmp_path)


def test_init_state_sets_defaults_once(state):
    state["mode"] = MODE_TEST
    session.init_state(state)

    assert state["mode"] == MODE_TEST
    assert state["loading"] == LoadingState.IDLE
    assert isinstance(state["loader"], IncrementalLoader)


def test_blank_search_is_ignored(state, store):
    assert session.begin_search(state, store, "   ") is False
    assert state["loading"] == LoadingState.IDLE
    assert store.history == []


def test_begin_search_resets_quiz_and_records_progress(state, store):
    state["selected_answers"] = {0: "w"}
    state["show_explanations"] = {0: True}

    assert session.begin_search(state, store, "IPC") is True

    assert state["loading"] == LoadingState.RESEARCHING
    assert state["current_topic"] == "IPC"
    assert state["selected_answers"] == {}
    assert state["show_explanations"] == {}
    assert store.history == ["IPC"]
    assert store.completed_topics == ["IPC"]


def test_begin_search_falls_back_to_current_topic(state, store):
    state["current_topic"] = "Rivers"

    assert session.begin_search(state, store) is True
    assert store.history == ["Rivers"]


def test_run_search_success(state, store):
    session.begin_search(state, store, "IPC")
    result = ResearchData(summary="s", type=MODE_STUDY_FLASH)

    assert session.run_search(state, lambda topic, mode: result) is True

    assert state["loading"] == LoadingState.COMPLETED
    assert state["data"] is result


def test_run_search_failure_sets_error_and_toast(state, store):
    session.begin_search(state, store, "IPC")

    def _fail(topic, mode):
        raise ContentFetchError("busy")

    assert session.run_search(state, _fail) is False

    assert state["loading"] == LoadingState.ERROR
    assert state["error"] == "busy"
    assert session.pop_toast(state) == ("busy", session.TOAST_ERROR)
    assert session.pop_toast(state) is None


def test_reset_search(state):
    state.update(loading=LoadingState.COMPLETED, data=ResearchData(summary="s"), current_topic="IPC")

    session.reset_search(state)

    assert state["loading"] == LoadingState.IDLE
    assert state["data"] is None
    assert state["current_topic"] == ""


def test_gated_mode_opens_upgrade_prompt(state):
    assert session.change_mode(state, PLAN_FREE, MODE_TEST) is False

    assert state["mode"] == MODE_STUDY_FLASH
    assert state["show_upgrade"] is True


def test_premium_mode_change(state):
    assert session.change_mode(state, PLAN_PREMIUM, MODE_STUDY_PRO) is True
    assert state["mode"] == MODE_STUDY_PRO
    assert state["show_upgrade"] is False


def test_syllabus_check_opens_upgrade_for_free_plan(state):
    assert session.check_feature(state, PLAN_FREE, "syllabus") is False
    assert state["show_upgrade"] is True


def test_unlock_messages(state):
    state["mode"] = MODE_TEST
    state["show_upgrade"] = True

    session.apply_unlock(state, PLAN_FREE)

    assert state["mode"] == MODE_STUDY_FLASH
    assert state["show_upgrade"] is False
    assert session.pop_toast(state) == ("Free Plan Activated", session.TOAST_INFO)

    session.apply_unlock(state, PLAN_PREMIUM)
    assert session.pop_toast(state) == ("Premium Plan Unlocked!", session.TOAST_SUCCESS)


def test_load_more_appends_new_questions_and_marks_jump(state):
    state["current_topic"] = "IPC"
    state["mode"] = MODE_TEST
    state["data"] = ResearchData(summary="s", mcqs=[_mcq("Q1"), _mcq("Q2")], type=MODE_TEST)
    state["loader"] = IncrementalLoader(lambda topic, mode, context: Extension(mcqs=[_mcq("Q2"), _mcq("Q3")]))

    assert session.load_more(state) == 1

    assert [m.question for m in state["data"].mcqs] == ["Q1", "Q2", "Q3"]
    assert state["jump_to_question"] == 2


def test_load_more_failure_in_test_mode_shows_toast(state):
    def _fail(topic, mode, context):
        raise ContentFetchError()

    state["data"] = ResearchData(summary="s", mcqs=[_mcq("Q1")], type=MODE_TEST)
    state["loader"] = IncrementalLoader(_fail)

    assert session.load_more(state) == 0
    assert session.pop_toast(state) == (session.LOAD_MORE_ERROR_MESSAGE, session.TOAST_ERROR)
    assert state["loader"].is_loading is False


def test_load_more_failure_in_study_mode_is_quiet(state):
    def _fail(topic, mode, context):
        raise ContentFetchError()

    state["data"] = ResearchData(summary="s", study_notes="<p>a</p>", type=MODE_STUDY_FLASH)
    state["loader"] = IncrementalLoader(_fail)

    assert session.load_more(state) == 0
    assert session.pop_toast(state) is None


def test_load_more_without_data_does_nothing(state):
    assert session.load_more(state) == 0


def test_answers_and_stats(state):
    state["data"] = ResearchData(summary="s", mcqs=[_mcq("Q1", "A"), _mcq("Q2", "x")], type=MODE_TEST)

    assert session.answer_question(state, 0, "w") is True
    assert session.answer_question(state, 0, "x") is False
    assert session.answer_question(state, 1, "y") is True

    assert session.quiz_stats(state) == {"correct": 1, "total": 2, "answered": 2}


def test_stats_without_data(state):
    assert session.quiz_stats(state) == {"correct": 0, "total": 0, "answered": 0}
