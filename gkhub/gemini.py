import json
import logging
import re
import time
from functools import wraps

from google import genai
from google.genai import errors, types

from gkhub import config
from gkhub.models import Extension, ResearchData, Source, coerce_mcqs
from gkhub.prompts import build_more_request, build_research_request

logger = logging.getLogger(__name__)

RATE_LIMIT_CODE = 429

_client = None


class ContentFetchError(RuntimeError):
    """Raised when study material could not be generated. ``message`` is safe to show."""

    def __init__(self, message=config.SERVER_BUSY_MESSAGE):
        super().__init__(message)
        self.message = message


def _is_rate_limited(error):
    return getattr(error, "code", None) == RATE_LIMIT_CODE


# --- EXPONENTIAL BACKOFF DECORATOR ---
def gemini_api_call_with_retry(func):
    """Decorator to handle Gemini API rate limiting with exponential backoff."""
    @wraps(func)
    def wrapper(*args, **kwargs):
        retries = 0
        delay = 1
        while True:
            try:
                return func(*args, **kwargs)
            except errors.APIError as e:
                if not _is_rate_limited(e):
                    raise
                retries += 1
                if retries >= config.MAX_RETRIES:
                    logger.error(f"API quota exceeded after {retries} attempts in {func.__name__}: {e}")
                    raise

                match = re.search(r'"retryDelay":\s*"(\d+)s"', str(e))
                if match:
                    wait_time = int(match.group(1)) + delay
                else:
                    wait_time = delay * (2 ** retries)

                logger.warning(f"Rate limit hit. Retrying in {wait_time} seconds... (Attempt {retries}/{config.MAX_RETRIES})")
                time.sleep(wait_time)
    return wrapper


# --- API SELF-DIAGNOSIS & UTILITIES ---
def configure(api_key):
    global _client
    _client = genai.Client(api_key=api_key)


def get_client():
    if _client is None:
        raise RuntimeError("Gemini client is not configured")
    return _client


def check_gemini_api():
    try:
        get_client().models.get(model=config.FLASH_MODEL)
        return "Valid"
    except Exception as e:
        logger.error(f"Gemini API check failed: {e}")
        return "Invalid"


def resilient_json_parser(json_string):
    """Parses model output as JSON, tolerating code fences and surrounding prose."""
    if not json_string:
        return None
    try:
        return json.loads(json_string)
    except json.JSONDecodeError:
        pass
    try:
        match = re.search(r'```(json)?\s*(\{.*?\})\s*```', json_string, re.DOTALL)
        if match:
            return json.loads(match.group(2))

        match = re.search(r'\{.*\}', json_string, re.DOTALL)
        if match:
            return json.loads(match.group(0))

        return None
    except json.JSONDecodeError:
        logger.error("Could not parse an AI JSON response.")
        return None


def build_config(request):
    """GenerateContentConfig for a GenerationRequest: JSON schema, optional search and thinking budget."""
    tools = None
    if request.use_search:
        tools = [types.Tool(google_search=types.GoogleSearch())]
    thinking_config = None
    if request.thinking_budget is not None:
        thinking_config = types.ThinkingConfig(thinking_budget=request.thinking_budget)
    return types.GenerateContentConfig(
        response_mime_type="application/json",
        response_schema=request.response_schema,
        tools=tools,
        thinking_config=thinking_config,
    )


@gemini_api_call_with_retry
def generate(request):
    """Sends a GenerationRequest and returns the raw response."""
    return get_client().models.generate_content(
        model=request.model_name,
        contents=request.prompt,
        config=build_config(request),
    )


def response_text(response):
    return getattr(response, "text", None) or "{}"


def extract_sources(response, limit=config.MAX_SOURCES):
    """Collects unique web citations from the first candidate's grounding metadata."""
    candidates = getattr(response, "candidates", None) or []
    if not candidates:
        return []
    metadata = getattr(candidates[0], "grounding_metadata", None)
    chunks = getattr(metadata, "grounding_chunks", None) or []

    sources, seen = [], set()
    for chunk in chunks:
        web = getattr(chunk, "web", None)
        title = getattr(web, "title", "") or "Web Source"
        uri = getattr(web, "uri", "") or "#"
        if uri == "#" or uri in seen:
            continue
        seen.add(uri)
        sources.append(Source(title=title, uri=uri))
    return sources[:limit]


def _parse_object(response):
    parsed = resilient_json_parser(response_text(response))
    if not isinstance(parsed, dict):
        raise ValueError("AI response was not a JSON object")
    return parsed


def fetch_research(topic, mode):
    """Generates the first batch of material for a topic. Raises ContentFetchError."""
    request = build_research_request(topic, mode)
    logger.info(f"Fetching {mode} material for '{topic}' with {request.model_name}")
    try:
        response = generate(request)
        parsed = _parse_object(response)
    except Exception as e:
        logger.error(f"Gemini API Error: {e}")
        raise ContentFetchError() from e

    return ResearchData(
        summary=parsed.get("summary") or "Summary not available.",
        study_notes=parsed.get("studyNotes") or "",
        mcqs=coerce_mcqs(parsed.get("mcqs")),
        sources=extract_sources(response),
        type=mode,
        image_url=None,
    )


def fetch_more(topic, mode, existing_context=None):
    """Generates additional notes or questions for an ongoing session."""
    request = build_more_request(topic, mode, existing_context)
    logger.info(f"Fetching more {mode} material for '{topic}'")
    try:
        parsed = _parse_object(generate(request))
    except Exception as e:
        logger.error(f"Fetch More Error: {e}")
        raise ContentFetchError() from e

    return Extension(
        study_notes=parsed.get("studyNotes") or "",
        mcqs=coerce_mcqs(parsed.get("mcqs")),
    )
