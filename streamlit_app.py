import logging

import streamlit as st

from gkhub import access, config, gemini, session
from gkhub.export import export_filename, export_text
from gkhub.grader import STATUS_CORRECT, STATUS_WRONG, question_status
from gkhub.models import MODE_STUDY_FLASH, MODE_STUDY_PRO, MODE_TEST, PLAN_NONE, PLAN_PREMIUM, LoadingState
from gkhub.store import LocalStateStore, new_profile_id
from gkhub.syllabus import FULL_SYLLABUS, IMPORTANT_CHAPTERS, QUICK_TOPICS, category_progress

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# --- PAGE CONFIGURATION ---
st.set_page_config(page_title=config.APP_NAME, page_icon="🛡️", layout="wide", initial_sidebar_state="collapsed")

MODE_LABELS = {
    MODE_STUDY_FLASH: "⚡ Fast Study",
    MODE_STUDY_PRO: "🔬 Pro Research",
    MODE_TEST: "📝 Mock Test",
}
MODE_PLACEHOLDERS = {
    MODE_TEST: "Type a topic for Mock Test...",
    MODE_STUDY_PRO: "Type a topic for Deep Research...",
    MODE_STUDY_FLASH: "Type a topic to study...",
}
LOADING_COPY = {
    MODE_TEST: ("Setting Exam Paper...", "Curating relevant questions from verified sources."),
    MODE_STUDY_PRO: ("Conducting Deep Research...", "Gathering detailed facts, dates, and analysis (~60s)."),
    MODE_STUDY_FLASH: ("Analyzing Topic...", "Generating concise study notes (~10s)."),
}
TOAST_ICONS = {session.TOAST_SUCCESS: "✅", session.TOAST_ERROR: "⚠️", session.TOAST_INFO: "ℹ️"}


# --- PROFILE & PERSISTENCE ---
def get_profile_id():
    """Keeps a stable profile id in the URL so state survives reloads."""
    profile_id = st.query_params.get("profile")
    if not profile_id:
        profile_id = new_profile_id()
        st.query_params["profile"] = profile_id
    return profile_id


def get_store():
    return LocalStateStore(get_profile_id())


@st.cache_data(ttl=600)
def api_status():
    return gemini.check_gemini_api()


def render_toast():
    toast = session.pop_toast(st.session_state)
    if toast:
        message, kind = toast
        st.toast(message, icon=TOAST_ICONS.get(kind))


# --- SUBSCRIPTION / ACCESS GATE ---
def show_subscription_page(store, is_upgrade=False):
    if is_upgrade:
        col_title, col_close = st.columns([6, 1])
        col_title.header("👑 Upgrade Your Prep")
        if col_close.button("✖ Close", key="close_upgrade"):
            st.session_state.show_upgrade = False; st.rerun()
        st.markdown("Get the edge with Deep Research, Unlimited Tests, and AI-powered insights.")
    else:
        st.title(f"🛡️ {config.APP_NAME}")
        st.markdown("The smartest way to prepare for Constable & PSI 2026.")

    cols = st.columns(len(access.PLAN_CATALOGUE))
    for col, plan in zip(cols, access.PLAN_CATALOGUE):
        with col.container(border=True):
            if plan["recommended"]:
                st.caption("⭐ RECOMMENDED")
            st.subheader(plan["duration"])
            st.markdown(f"### {plan['price']}" + ("" if plan["is_free"] else " /total"))
            for feature in plan["features"]:
                st.write(f"✔ {feature}")
            if plan["is_free"]:
                if st.button("Activate Free Plan", key=f"free_{is_upgrade}", use_container_width=True):
                    unlocked = access.activate_free_plan(store)
                    session.apply_unlock(st.session_state, unlocked); st.rerun()
            else:
                st.info("After payment, request your Passkey from Admin and enter it below.")

    with st.form(f"passkey_form_{is_upgrade}"):
        st.markdown("#### 🔑 Have a Passkey?")
        passkey = st.text_input("Passkey", placeholder="Enter key (e.g. FREE2026)", label_visibility="collapsed")
        submitted = st.form_submit_button("Unlock")
    if submitted:
        try:
            unlocked = access.unlock_with_passkey(store, passkey)
        except access.InvalidPasskeyError as e:
            st.error(e.message)
        else:
            session.apply_unlock(st.session_state, unlocked)
            if unlocked == PLAN_PREMIUM:
                st.balloons()
            st.rerun()
    st.caption("Secure Platform • 2026 Exam Ready")


# --- IDLE STATE: MODE & TOPIC SELECTION ---
def show_idle_state(store):
    plan = store.plan
    st.header("Master Your Exam Prep")
    st.markdown("Select a mode to generate AI-powered study materials, deep research notes, or real-time mock tests.")

    mode_cols = st.columns(3)
    for col, mode in zip(mode_cols, (MODE_STUDY_FLASH, MODE_STUDY_PRO, MODE_TEST)):
        label = MODE_LABELS[mode]
        if mode != MODE_STUDY_FLASH and plan != PLAN_PREMIUM:
            label += " 🔒"
        is_active = st.session_state.mode == mode
        if col.button(label, key=f"mode_{mode}", type="primary" if is_active else "secondary", use_container_width=True):
            session.change_mode(st.session_state, plan, mode); st.rerun()

    with st.form("search_form", clear_on_submit=False):
        topic = st.text_input("Topic", value=st.session_state.current_topic,
                              placeholder=MODE_PLACEHOLDERS[st.session_state.mode], label_visibility="collapsed")
        if st.form_submit_button("Start", type="primary"):
            start_search(store, topic)

    history = store.history
    if history:
        st.caption("Recent searches")
        chip_cols = st.columns(len(history) + 1)
        for i, term in enumerate(history):
            if chip_cols[i].button(term, key=f"history_{i}"):
                start_search(store, term)
        if chip_cols[-1].button("🗑 Clear", key="clear_history"):
            store.clear_history(); st.rerun()

    col_topics, col_syllabus = st.columns([1, 1], gap="large")
    with col_topics:
        st.subheader("Quick Topics")
        grid = st.columns(2)
        for i, item in enumerate(QUICK_TOPICS):
            if grid[i % 2].button(item["title"], key=f"quick_{i}", use_container_width=True):
                start_search(store, item["query"])
        st.subheader("Important Chapters")
        for i, item in enumerate(IMPORTANT_CHAPTERS):
            if st.button(f"{item['title']} · {item['desc']}", key=f"chapter_{i}", use_container_width=True):
                start_search(store, item["query"])
    with col_syllabus:
        show_syllabus(store, plan)


def show_syllabus(store, plan):
    st.subheader("Full Syllabus")
    completed = store.completed_topics
    for idx, subject in enumerate(FULL_SYLLABUS):
        done, total = category_progress(subject, completed)
        is_open = st.session_state.open_category == subject["title"]
        label = f"{'▾' if is_open else '▸'} {subject['title']}  ({done}/{total})"
        if st.button(label, key=f"category_{idx}", use_container_width=True):
            if session.check_feature(st.session_state, plan, "syllabus"):
                st.session_state.open_category = None if is_open else subject["title"]
            st.rerun()
        if is_open:
            for s_idx, subtopic in enumerate(subject["subtopics"]):
                marker = "✅" if subtopic in completed else "○"
                if st.button(f"{marker} {subtopic}", key=f"subtopic_{idx}_{s_idx}"):
                    start_search(store, subtopic)


def start_search(store, topic):
    if session.begin_search(st.session_state, store, topic):
        st.rerun()


# --- RESEARCHING STATE ---
def show_researching_state():
    title, detail = LOADING_COPY[st.session_state.mode]
    st.header(title)
    st.caption(detail)
    with st.spinner(detail):
        session.run_search(st.session_state)
    st.rerun()


# --- ERROR STATE ---
def show_error_state():
    st.error(st.session_state.error or config.SERVER_BUSY_MESSAGE)
    if st.button("Try Again", type="primary"):
        session.reset_search(st.session_state); st.rerun()


# --- COMPLETED STATE ---
def show_results_state():
    data = st.session_state.data
    topic = st.session_state.current_topic

    col_title, col_download, col_new = st.columns([4, 1, 1])
    col_title.header(topic)
    col_download.download_button("⬇ Download", data=export_text(topic, data),
                                 file_name=export_filename(topic), mime="text/plain")
    if col_new.button("New Search"):
        session.reset_search(st.session_state); st.rerun()

    st.markdown(f"**{data.summary}**")
    if data.type == MODE_TEST:
        show_test_results(data)
    else:
        show_study_notes(data)

    if data.sources:
        st.subheader("Sources")
        for source in data.sources:
            st.markdown(f"- [{source.title}]({source.uri})")


def show_study_notes(data):
    with st.sidebar:
        st.subheader("Research Mode" if data.type == MODE_STUDY_PRO else "Fast Study")
    st.markdown(data.study_notes, unsafe_allow_html=True)
    st.divider()
    if st.button("📖 Load More Notes", use_container_width=True):
        with st.spinner("Extending your notes..."):
            session.load_more(st.session_state)
        st.rerun()


def show_test_results(data):
    answers = st.session_state.selected_answers
    stats = session.quiz_stats(st.session_state)

    with st.sidebar:
        st.subheader("Score")
        st.metric("Correct", f"{stats['correct']} / {stats['total']}")
        st.caption(f"Answered: {stats['answered']}")
        nav_cols = st.columns(5)
        for idx, mcq in enumerate(data.mcqs):
            status = question_status(mcq, answers, idx)
            marker = "🟢" if status == STATUS_CORRECT else "🔴" if status == STATUS_WRONG else "⚪"
            nav_cols[idx % 5].markdown(f"[{marker}{idx + 1}](#q-{idx})")

    for idx, mcq in enumerate(data.mcqs):
        with st.container(border=True):
            st.markdown(f'<div id="q-{idx}"></div>', unsafe_allow_html=True)
            st.markdown(f"**{idx + 1}. {mcq.question}**")
            revealed = st.session_state.show_explanations.get(idx, False)
            for o_idx, option in enumerate(mcq.options):
                prefix = ""
                if revealed:
                    status = question_status(mcq, {idx: option}, idx)
                    if status == STATUS_CORRECT:
                        prefix = "✅ "
                    elif answers.get(idx) == option:
                        prefix = "❌ "
                if st.button(f"{prefix}{option}", key=f"q_{idx}_{o_idx}", disabled=revealed, use_container_width=True):
                    session.answer_question(st.session_state, idx, option); st.rerun()
            if revealed:
                st.info(mcq.explanation or "No explanation provided.")

    if st.session_state.jump_to_question is not None:
        st.caption(f"New questions start at #{st.session_state.jump_to_question + 1}.")
    if st.button("➕ Load More Questions", type="primary", use_container_width=True):
        with st.spinner("Generating new questions..."):
            session.load_more(st.session_state)
        st.rerun()


# --- MAIN APP ---
def main():
    api_key = config.get_gemini_api_key()
    if not api_key:
        st.error("Gemini API key ('api_key') not found in st.secrets.toml or GEMINI_API_KEY. Please add it."); st.stop()
    gemini.configure(api_key)

    session.init_state(st.session_state)
    store = get_store()
    render_toast()

    if store.plan == PLAN_NONE:
        show_subscription_page(store)
        return

    # --- SIDEBAR ---
    st.sidebar.title(config.APP_NAME)
    st.sidebar.metric("Your Plan", "Premium" if store.plan == PLAN_PREMIUM else "Free Plan")
    if store.plan != PLAN_PREMIUM and st.sidebar.button("Upgrade"):
        st.session_state.show_upgrade = True; st.rerun()
    st.sidebar.caption(f"Topics completed: {len(store.completed_topics)}")
    st.sidebar.divider()
    st.sidebar.subheader("API Status")
    st.sidebar.write(f"Gemini: **{api_status()}**")
    st.sidebar.divider()

    if st.session_state.show_upgrade:
        show_subscription_page(store, is_upgrade=True)
        return

    state_map = {
        LoadingState.IDLE: lambda: show_idle_state(store),
        LoadingState.RESEARCHING: show_researching_state,
        LoadingState.ERROR: show_error_state,
        LoadingState.COMPLETED: show_results_state,
    }
    loading = st.session_state.loading
    if loading == LoadingState.COMPLETED and st.session_state.data is None:
        loading = LoadingState.IDLE
    state_map.get(loading, lambda: show_idle_state(store))()


if __name__ == "__main__":
    main()
