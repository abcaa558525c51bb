"""Per-profile persistence of plan tier, search history and completed topics.

Each browser profile gets one JSON file under ``DATA_DIR``. The profile id
travels in the page URL so a returning learner sees the same state.
"""

import hashlib
import json
import logging
import uuid

from gkhub import config
from gkhub.models import PLAN_NONE, PLANS

logger = logging.getLogger(__name__)

DEFAULT_DATA = {
    "user_plan": PLAN_NONE,
    "search_history": [],
    "completed_topics": [],
}


def new_profile_id():
    return uuid.uuid4().hex


def get_profile_data_path(profile_id, data_dir=None):
    """Generates a safe filepath for a profile's data."""
    safe_filename = hashlib.md5(profile_id.encode()).hexdigest() + ".json"
    return (data_dir or config.DATA_DIR) / safe_filename


def add_to_history(history, topic, limit=config.HISTORY_LIMIT):
    """Returns history with topic moved to the front, deduplicated and capped."""
    if not topic or not topic.strip():
        return list(history)
    return [topic] + [t for t in history if t != topic][: limit - 1]


class LocalStateStore:
    def __init__(self, profile_id, data_dir=None):
        self.profile_id = profile_id
        self.path = get_profile_data_path(profile_id, data_dir)
        self.data = self._load()

    def _load(self):
        data = json.loads(json.dumps(DEFAULT_DATA))
        if not self.path.exists():
            return data
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                saved = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(f"Ignoring unreadable profile file {self.path}: {e}")
            return data
        if not isinstance(saved, dict):
            return data
        # Back-fill keys missing from older files.
        for key, value in saved.items():
            if key in data and not isinstance(value, type(data[key])):
                continue
            data[key] = value
        if data["user_plan"] not in PLANS:
            data["user_plan"] = PLAN_NONE
        return data

    def save(self):
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(self.data, f, indent=2, ensure_ascii=False)

    # --- PLAN ---
    @property
    def plan(self):
        return self.data["user_plan"]

    def set_plan(self, plan):
        if plan not in PLANS:
            raise ValueError(f"Unknown plan: {plan}")
        self.data["user_plan"] = plan
        self.save()

    # --- SEARCH HISTORY ---
    @property
    def history(self):
        return list(self.data["search_history"])

    def add_history(self, topic):
        updated = add_to_history(self.data["search_history"], topic)
        if updated != self.data["search_history"]:
            self.data["search_history"] = updated
            self.save()
        return self.history

    def clear_history(self):
        self.data["search_history"] = []
        self.save()

    # --- PROGRESS ---
    @property
    def completed_topics(self):
        return list(self.data["completed_topics"])

    def is_completed(self, topic):
        return topic in self.data["completed_topics"]

    def mark_completed(self, topic):
        """Adds topic to the completed set. Returns False if it was already there."""
        if not topic or topic in self.data["completed_topics"]:
            return False
        self.data["completed_topics"].append(topic)
        self.save()
        return True
