import re

from gkhub.loader import html_to_text
from gkhub.models import is_study_mode


def export_filename(topic, suffix="_Notes.txt"):
    base = re.sub(r"[^\w\s-]", "", topic or "", flags=re.ASCII).strip()
    base = re.sub(r"\s+", "_", base) or "Study_Material"
    return f"{base}{suffix}"


def export_text(topic, data):
    """Plain-text rendering of a result for download."""
    if is_study_mode(data.type) and data.study_notes:
        notes = html_to_text(data.study_notes).replace("\n", ". ")
        return f"Subject: {topic}\n\n{notes}"

    questions = "\n".join(
        f"{i + 1}. {mcq.question}\nAnswer: {mcq.correct_answer}\nExplanation: {mcq.explanation}\n"
        for i, mcq in enumerate(data.mcqs)
    )
    return f"Subject: {topic}\n\nSummary:\n{data.summary}\n\nQuestions:\n{questions}"
