"""Prompt templates and request settings for each study mode."""

from dataclasses import dataclass

from gkhub import config
from gkhub.models import MODE_STUDY_FLASH, MODE_STUDY_PRO, MODE_TEST, MODES

# --- RESPONSE SCHEMAS ---
MCQ_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "question": {"type": "STRING"},
        "options": {"type": "ARRAY", "items": {"type": "STRING"}},
        "correctAnswer": {"type": "STRING"},
        "explanation": {"type": "STRING"},
    },
    "required": ["question", "options", "correctAnswer", "explanation"],
}

RESEARCH_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "summary": {"type": "STRING"},
        "studyNotes": {"type": "STRING"},
        "mcqs": {"type": "ARRAY", "items": MCQ_SCHEMA},
    },
    "required": ["summary", "studyNotes", "mcqs"],
}

EXTENSION_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "studyNotes": {"type": "STRING"},
        "mcqs": {"type": "ARRAY", "items": MCQ_SCHEMA},
    },
    "required": ["studyNotes", "mcqs"],
}


@dataclass
class GenerationRequest:
    model_name: str
    prompt: str
    response_schema: dict
    use_search: bool = False
    thinking_budget: int = None


def _check_mode(mode):
    if mode not in MODES:
        raise ValueError(f"Unknown mode: {mode}")


def build_research_request(topic, mode):
    """Builds the first request for a topic in the given mode."""
    _check_mode(mode)
    if mode == MODE_TEST:
        prompt = f"""
    Role: Gujarat Police Constable / PSI 2026 Paper Setter.
    Topic: "{topic}"

    Task: Generate a strict JSON response containing a short summary and {config.TEST_QUESTION_COUNT} MCQs.

    ACTION: You MUST use the Google Search tool to find the most recent and accurate information.

    Language: Gujarati (Pure & Grammatically Correct).

    JSON Requirements:
    - "summary": A brief 2-3 line overview.
    - "studyNotes": Keep empty string for test mode.
    - "mcqs": Array of {config.TEST_QUESTION_COUNT} questions.
    """
        return GenerationRequest(config.FLASH_MODEL, prompt, RESEARCH_SCHEMA, use_search=True)

    if mode == MODE_STUDY_FLASH:
        prompt = f"""
    Role: Subject Expert for Gujarat Competitive Exams.
    Topic: "{topic}"

    Task: Create a VISUALLY RICH, CONCISE study guide in Gujarati.

    Instructions:
    1. Content: Cover Essentials, Dates, Key Figures.
    2. FORMATTING: "studyNotes" must be a valid HTML string using Tailwind classes.
    3. ICONS: Use FontAwesome icons in the HTML.

    HTML Templates (for studyNotes):
    - Headings: <h2 class="text-2xl font-black text-slate-800 mb-4">...</h2>
    - Subheadings: <h3 class="text-lg font-bold text-slate-800 mt-4 mb-2">...</h3>
    - Feature Box: <div class="bg-emerald-50 border-emerald-100 rounded-xl p-4 my-4">...</div>
    - List: <ul class="space-y-2 list-disc list-inside text-slate-700">...</ul>

    JSON Requirements:
    - "summary": A 1-sentence hook.
    - "studyNotes": The full HTML content.
    - "mcqs": Empty array.
    """
        return GenerationRequest(config.FLASH_MODEL, prompt, RESEARCH_SCHEMA,
                                 thinking_budget=config.FLASH_THINKING_BUDGET)

    prompt = f"""
    Role: Senior Professor & Researcher for Gujarat Competitive Exams (GPSC Level).
    Topic: "{topic}"

    Task: Create a MASSIVE, DEEPLY RESEARCHED, HIGH-QUALITY study guide in Gujarati.

    Goal: Comprehensiveness, Niche Details, Conceptual Clarity. Provide data that is not easily available.
    Action: Use Google Search to verify facts and find latest data.

    Instructions:
    1. Content: Deep dive into History, nuances of Law, exceptions, complex Geography.
    2. Analysis: Provide analysis of why things happened.
    3. FORMATTING: "studyNotes" must be rich HTML with Tailwind classes.

    HTML Templates (for studyNotes):
    - Headings: <h2 class="text-2xl font-black text-slate-800 border-b border-indigo-100 mt-8 mb-4 pb-2">...</h2>
    - Feature Boxes: Use 'Did You Know' (bg-amber-50), 'Key Facts' (bg-emerald-50), 'Deep Dive' (bg-purple-50).
    - Tables: <table class="w-full border-collapse border border-slate-200 rounded-lg overflow-hidden my-6">...</table>

    JSON Requirements:
    - "summary": A detailed abstract.
    - "studyNotes": The full HTML content.
    - "mcqs": Empty array.
    """
    return GenerationRequest(config.PRO_MODEL, prompt, RESEARCH_SCHEMA, use_search=True,
                             thinking_budget=config.PRO_THINKING_BUDGET)


def build_more_request(topic, mode, existing_context=None):
    """Builds a load-more request continuing from what the learner already has.

    existing_context is the notes text (study modes) or the question texts
    (test mode).
    """
    _check_mode(mode)
    existing_context = list(existing_context or [])

    if mode == MODE_TEST:
        mcq_context = "\n- ".join(existing_context[-config.MORE_CONTEXT_QUESTIONS:])
        prompt = f"""
    Topic: "{topic}"
    Task: Generate {config.MORE_QUESTION_COUNT} NEW MCQs.
    Exclude Questions similar to: {mcq_context}
    Language: Gujarati.

    JSON Requirements:
    - "mcqs": Array of {config.MORE_QUESTION_COUNT} new questions.
    - "studyNotes": Empty string.
    """
        return GenerationRequest(config.FLASH_MODEL, prompt, EXTENSION_SCHEMA, use_search=True)

    context_str = "\n".join(existing_context)[-config.MORE_CONTEXT_CHARS:]

    if mode == MODE_STUDY_PRO:
        prompt = f"""
    Role: Senior Professor.
    Topic: "{topic}"
    Previous Context: "...{context_str}"

    Task: Provide a DETAILED EXTENSION to the study material in Gujarati. Continue naturally from the previous context.

    Instructions:
    1. Content: Go deeper into specific sub-topics.
    2. FORMATTING: Use HTML structure with Tailwind classes (headings, paragraphs, lists, tables).

    JSON Requirements:
    - "studyNotes": The HTML string extension.
    - "mcqs": Empty array.
    """
        return GenerationRequest(config.PRO_MODEL, prompt, EXTENSION_SCHEMA,
                                 thinking_budget=config.PRO_THINKING_BUDGET)

    prompt = f"""
    Role: Subject Expert.
    Topic: "{topic}"
    Previous Context: "...{context_str}"

    Task: Extend study material in Gujarati. Continue naturally.

    Instructions:
    1. Content: Additional key points.
    2. FORMATTING: Use HTML structure with Tailwind classes.

    JSON Requirements:
    - "studyNotes": The HTML string extension.
    - "mcqs": Empty array.
    """
    return GenerationRequest(config.FLASH_MODEL, prompt, EXTENSION_SCHEMA,
                             thinking_budget=config.MORE_FLASH_THINKING_BUDGET)
