"""Load-more bookkeeping: building continuation context and merging new material."""

import logging
from dataclasses import replace

from bs4 import BeautifulSoup

from gkhub.models import MODE_TEST, is_study_mode

logger = logging.getLogger(__name__)


def html_to_text(html):
    """Visible text of an HTML fragment, one block per line."""
    if not html:
        return ""
    return BeautifulSoup(html, "html.parser").get_text("\n", strip=True)


def build_context(data, mode):
    """Context sent with a load-more request: note text for study modes, question texts for tests."""
    if data is None:
        return []
    if is_study_mode(mode) and data.study_notes:
        return [html_to_text(data.study_notes)]
    return [mcq.question for mcq in data.mcqs]


CONTINUED_DIVIDER = (
    '<div style="text-align:center;margin:2.5rem 0;border-top:1px dashed #cbd5e1;">'
    '<span style="position:relative;top:-0.8em;background:#f8fafc;padding:0.2em 1em;'
    'font-size:0.75rem;font-weight:700;color:#94a3b8;letter-spacing:0.1em;">⬇ CONTINUED</span>'
    '</div>'
)


def merge_extension(data, extension, mode):
    """Returns (merged_data, added_questions).

    Study modes append a "Continued" divider and the new notes HTML, unless the
    notes already end with that exact fragment. Test mode appends only
    questions whose trimmed text is not already present. Merging the same
    extension twice is a no-op.
    """
    study_notes = data.study_notes or ""
    mcqs = list(data.mcqs or [])
    added = 0

    new_notes = (extension.study_notes or "").strip()
    if is_study_mode(mode) and new_notes and not study_notes.rstrip().endswith(new_notes):
        study_notes = f"{study_notes}\n{CONTINUED_DIVIDER}\n{new_notes}\n"

    if mode == MODE_TEST and extension.mcqs:
        existing = {mcq.question.strip() for mcq in mcqs}
        for mcq in extension.mcqs:
            key = mcq.question.strip()
            if key in existing:
                continue
            existing.add(key)
            mcqs.append(mcq)
            added += 1
        logger.info(f"Merged {added} new questions ({len(extension.mcqs) - added} duplicates dropped)")

    return replace(data, study_notes=study_notes, mcqs=mcqs), added


class IncrementalLoader:
    """Guards load-more requests so only one runs at a time for a session."""

    def __init__(self, fetch_more):
        self.fetch_more = fetch_more
        self.is_loading = False

    def load_more(self, topic, mode, data):
        """Fetches and merges more material. Returns (data, added) or None if skipped.

        Errors from fetch_more propagate; the in-flight flag is always cleared.
        """
        if data is None or self.is_loading:
            return None
        self.is_loading = True
        try:
            extension = self.fetch_more(topic, mode, build_context(data, mode))
            return merge_extension(data, extension, mode)
        finally:
            self.is_loading = False
