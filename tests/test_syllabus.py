from __future__ import annotations

from gkhub.syllabus import FULL_SYLLABUS, IMPORTANT_CHAPTERS, QUICK_TOPICS, all_subtopics, category_progress


def test_catalogue_sizes():
    assert len(FULL_SYLLABUS) == 18
    assert len(QUICK_TOPICS) == 16
    assert len(IMPORTANT_CHAPTERS) == 8
    assert all(item["query"] for item in QUICK_TOPICS + IMPORTANT_CHAPTERS)


def test_every_category_has_subtopics():
    assert all(category["title"] and category["subtopics"] for category in FULL_SYLLABUS)
    assert len(all_subtopics()) == sum(len(c["subtopics"]) for c in FULL_SYLLABUS)


def test_category_progress_counts_completed_subtopics():
    category = FULL_SYLLABUS[0]
    completed = category["subtopics"][:2] + ["unrelated"]

    assert category_progress(category, completed) == (2, len(category["subtopics"]))
