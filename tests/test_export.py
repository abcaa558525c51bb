from __future__ import annotations

from gkhub.export import export_filename, export_text
from gkhub.models import MCQ, MODE_STUDY_PRO, MODE_TEST, ResearchData


def test_filename_is_sanitised():
    assert export_filename("Dandi March: 1930!") == "Dandi_March_1930_Notes.txt"
    assert export_filename("  IPC   sections ") == "IPC_sections_Notes.txt"


def test_filename_falls_back_for_non_ascii_topics():
    assert export_filename("ગુજરાતનો ઈતિહાસ") == "Study_Material_Notes.txt"
    assert export_filename("") == "Study_Material_Notes.txt"


def test_study_export_flattens_notes():
    data = ResearchData(summary="s", study_notes="<h2>Title</h2><p>Body</p>", type=MODE_STUDY_PRO)

    assert export_text("IPC", data) == "Subject: IPC\n\nTitle. Body"


def test_test_export_lists_questions():
    mcq = MCQ(question="Q?", options=["a", "b"], correct_answer="a", explanation="because")
    data = ResearchData(summary="Overview", mcqs=[mcq], type=MODE_TEST)

    text = export_text("IPC", data)

    assert text.startswith("Subject: IPC\n\nSummary:\nOverview\n\nQuestions:\n")
    assert "1. Q?\nAnswer: a\nExplanation: because\n" in text
