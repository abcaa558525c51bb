"""Shared result types for study material and quiz questions."""

from dataclasses import dataclass, field
from enum import Enum

# --- MODES & PLANS ---
MODE_TEST = "test"
MODE_STUDY_FLASH = "study-flash"
MODE_STUDY_PRO = "study-pro"
MODES = (MODE_STUDY_FLASH, MODE_STUDY_PRO, MODE_TEST)

PLAN_NONE = "none"
PLAN_FREE = "free"
PLAN_PREMIUM = "premium"
PLANS = (PLAN_NONE, PLAN_FREE, PLAN_PREMIUM)


def is_study_mode(mode):
    return mode in (MODE_STUDY_FLASH, MODE_STUDY_PRO)


class LoadingState(str, Enum):
    IDLE = "IDLE"
    RESEARCHING = "RESEARCHING"
    GENERATING_MCQS = "GENERATING_MCQS"
    COMPLETED = "COMPLETED"
    ERROR = "ERROR"


@dataclass
class MCQ:
    question: str
    options: list = field(default_factory=list)
    correct_answer: str = ""
    explanation: str = ""

    @classmethod
    def from_dict(cls, raw):
        """Builds an MCQ from loosely shaped model output, or None if there is no question."""
        if not isinstance(raw, dict):
            return None
        question = str(raw.get("question") or "").strip()
        if not question:
            return None
        options = raw.get("options") or []
        if isinstance(options, dict):
            options = [value for _, value in sorted(options.items())]
        elif not isinstance(options, list):
            options = [options]
        options = [str(opt).strip() for opt in options if str(opt).strip()]
        correct = raw.get("correctAnswer", raw.get("correct_answer", ""))
        return cls(
            question=question,
            options=options,
            correct_answer=str(correct or ""),
            explanation=str(raw.get("explanation") or ""),
        )


@dataclass
class Source:
    title: str
    uri: str


@dataclass
class ResearchData:
    summary: str
    study_notes: str = ""
    mcqs: list = field(default_factory=list)
    sources: list = field(default_factory=list)
    type: str = MODE_STUDY_FLASH
    image_url: str = None


@dataclass
class Extension:
    """Additional material returned by a load-more request."""
    study_notes: str = ""
    mcqs: list = field(default_factory=list)


def coerce_mcqs(raw_items):
    """Turns a JSON list into MCQ objects, dropping entries without question text."""
    if not isinstance(raw_items, list):
        return []
    mcqs = []
    for item in raw_items:
        mcq = item if isinstance(item, MCQ) else MCQ.from_dict(item)
        if mcq is not None:
            mcqs.append(mcq)
    return mcqs
