import os
from pathlib import Path

import streamlit as st
from streamlit.errors import StreamlitAPIException

# --- CONFIGURATION & CONSTANTS ---
APP_NAME = "Gujarat Police GK Hub"
MAX_RETRIES = 3
HISTORY_LIMIT = 8
MAX_SOURCES = 5
DATA_DIR = Path(os.getenv("GKHUB_DATA_DIR", "user_data"))

# --- MODELS ---
FLASH_MODEL = "gemini-3-flash-preview"
PRO_MODEL = "gemini-3-pro-preview"

# --- THINKING BUDGETS (tokens) ---
FLASH_THINKING_BUDGET = 1024
PRO_THINKING_BUDGET = 32768
MORE_FLASH_THINKING_BUDGET = 2048

# --- QUESTION COUNTS ---
TEST_QUESTION_COUNT = 30
MORE_QUESTION_COUNT = 20
MORE_CONTEXT_QUESTIONS = 50
MORE_CONTEXT_CHARS = 1000

# --- ACCESS ---
DEFAULT_PREMIUM_PASSKEY = "RABARI2214"
DEFAULT_FREE_PASSKEY = "FREE2026"

SERVER_BUSY_MESSAGE = "સર્વર વ્યસ્ત છે. કૃપા કરીને થોડી વાર પછી પ્રયાસ કરો."


def get_secret(section, key, env_var=None, default=None):
    """Looks up st.secrets[section][key], then the environment, then the default."""
    try:
        return st.secrets[section][key]
    except (KeyError, FileNotFoundError, StreamlitAPIException):
        pass
    if env_var:
        value = os.getenv(env_var)
        if value:
            return value
    return default


def get_gemini_api_key():
    return get_secret("gemini", "api_key", env_var="GEMINI_API_KEY")


def get_passkeys():
    """Returns (premium_passkey, free_passkey)."""
    premium = get_secret("access", "premium_passkey", env_var="GKHUB_PREMIUM_PASSKEY", default=DEFAULT_PREMIUM_PASSKEY)
    free = get_secret("access", "free_passkey", env_var="GKHUB_FREE_PASSKEY", default=DEFAULT_FREE_PASSKEY)
    return premium, free
