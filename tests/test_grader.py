from __future__ import annotations

from gkhub import grader
from gkhub.models import MCQ


def _mcq(correct):
    return MCQ(question="Capital of Gujarat?", options=["Surat", "Gandhinagar", "Vadodara", "Rajkot"],
               correct_answer=correct, explanation="")


def test_literal_answer_matches():
    assert grader.is_correct(_mcq("Gandhinagar"), "Gandhinagar")
    assert not grader.is_correct(_mcq("Gandhinagar"), "Surat")


def test_letter_answer_matches_option_at_index():
    assert grader.is_correct(_mcq("B"), "Gandhinagar")
    assert grader.is_correct(_mcq(" b "), "Gandhinagar")
    assert not grader.is_correct(_mcq("B"), "Surat")


def test_letter_beyond_options_is_wrong():
    mcq = MCQ(question="q", options=["x", "y"], correct_answer="D", explanation="")

    assert not grader.is_correct(mcq, "y")


def test_missing_selection_is_wrong():
    assert not grader.is_correct(_mcq("B"), None)


def test_score_tallies_correct_and_answered():
    mcqs = [_mcq("B"), _mcq("Surat"), _mcq("C")]
    answers = {0: "Gandhinagar", 1: "Rajkot"}

    assert grader.score(mcqs, answers) == {"correct": 1, "total": 3, "answered": 2}


def test_question_status():
    mcq = _mcq("A")

    assert grader.question_status(mcq, {}, 0) == grader.STATUS_UNANSWERED
    assert grader.question_status(mcq, {0: "Surat"}, 0) == grader.STATUS_CORRECT
    assert grader.question_status(mcq, {0: "Rajkot"}, 0) == grader.STATUS_WRONG


def test_answers_are_final_once_recorded():
    answers, revealed = {}, {}

    assert grader.record_answer(answers, revealed, 0, "Surat") is True
    assert grader.record_answer(answers, revealed, 0, "Rajkot") is False
    assert answers == {0: "Surat"}
    assert revealed == {0: True}
