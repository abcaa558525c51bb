"""Session state transitions for the study app.

Every function takes the session state mapping (``st.session_state`` in the
app, a plain dict in tests) and uses item access only.
"""

import logging

from gkhub import access, gemini, grader
from gkhub.loader import IncrementalLoader
from gkhub.models import MODE_STUDY_FLASH, MODE_TEST, PLAN_PREMIUM, LoadingState

logger = logging.getLogger(__name__)

TOAST_SUCCESS = "success"
TOAST_ERROR = "error"
TOAST_INFO = "info"

LOAD_MORE_ERROR_MESSAGE = "Error loading more data."

DEFAULT_STATE = {
    "loading": LoadingState.IDLE,
    "data": None,
    "error": None,
    "current_topic": "",
    "mode": MODE_STUDY_FLASH,
    "selected_answers": {},
    "show_explanations": {},
    "show_upgrade": False,
    "toast": None,
    "open_category": None,
    "jump_to_question": None,
}


def init_state(state):
    for key, value in DEFAULT_STATE.items():
        if key not in state:
            state[key] = dict(value) if isinstance(value, dict) else value
    if "loader" not in state:
        state["loader"] = IncrementalLoader(gemini.fetch_more)


def show_toast(state, message, kind):
    state["toast"] = (message, kind)


def pop_toast(state):
    toast = state.get("toast")
    state["toast"] = None
    return toast


# --- ACCESS ---
def apply_unlock(state, plan):
    """Updates the session after a plan was unlocked and stored."""
    state["show_upgrade"] = False
    state["mode"] = access.mode_after_unlock(plan, state["mode"])
    if plan == PLAN_PREMIUM:
        show_toast(state, "Premium Plan Unlocked!", TOAST_SUCCESS)
    else:
        show_toast(state, "Free Plan Activated", TOAST_INFO)


def change_mode(state, plan, requested_mode):
    mode, needs_upgrade = access.select_mode(plan, state["mode"], requested_mode)
    state["mode"] = mode
    if needs_upgrade:
        state["show_upgrade"] = True
    return not needs_upgrade


def check_feature(state, plan, feature):
    if access.has_feature(plan, feature):
        return True
    state["show_upgrade"] = True
    return False


# --- SEARCH ---
def begin_search(state, store, topic=None):
    """Prepares a search for topic (or the current topic). Returns False for blank topics."""
    topic = topic or state["current_topic"]
    if not topic or not topic.strip():
        return False
    state["loading"] = LoadingState.RESEARCHING
    state["error"] = None
    state["data"] = None
    state["current_topic"] = topic
    state["selected_answers"] = {}
    state["show_explanations"] = {}
    state["jump_to_question"] = None
    store.add_history(topic)
    store.mark_completed(topic)
    return True


def run_search(state, fetch_research=None):
    """Fetches material for the pending search and records the outcome."""
    fetch_research = fetch_research or gemini.fetch_research
    try:
        result = fetch_research(state["current_topic"], state["mode"])
    except gemini.ContentFetchError as e:
        state["loading"] = LoadingState.ERROR
        state["error"] = e.message
        show_toast(state, e.message, TOAST_ERROR)
        return False
    state["loading"] = LoadingState.COMPLETED
    state["data"] = result
    return True


def reset_search(state):
    state["loading"] = LoadingState.IDLE
    state["data"] = None
    state["current_topic"] = ""


# --- LOAD MORE ---
def load_more(state):
    """Requests more material for the current result. Returns the number of new questions."""
    data = state["data"]
    mode = data.type if data is not None else state["mode"]
    try:
        outcome = state["loader"].load_more(state["current_topic"], mode, data)
    except gemini.ContentFetchError as e:
        logger.warning(f"Load more failed for '{state['current_topic']}': {e}")
        if mode == MODE_TEST:
            show_toast(state, LOAD_MORE_ERROR_MESSAGE, TOAST_ERROR)
        return 0
    if outcome is None:
        return 0

    previous_count = len(data.mcqs)
    state["data"], added = outcome
    if mode == MODE_TEST and added:
        state["jump_to_question"] = previous_count
    return added


# --- QUIZ ---
def answer_question(state, index, option):
    return grader.record_answer(state["selected_answers"], state["show_explanations"], index, option)


def quiz_stats(state):
    data = state["data"]
    if data is None:
        return {"correct": 0, "total": 0, "answered": 0}
    return grader.score(data.mcqs, state["selected_answers"])
