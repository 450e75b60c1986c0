# services/gemini.py
import functools
import logging

import httpx
from google import genai
from google.genai import types, errors as gerrors

from config import settings
from core.errors import ErrorKind, MISSING_KEY_MESSAGE, SuggestionError

_LOG = logging.getLogger(__name__)


# ───────────── Client ─────────────
@functools.lru_cache(maxsize=1)
def _client() -> genai.Client:
    if not settings.gemini_api_key:
        raise SuggestionError(ErrorKind.API, MISSING_KEY_MESSAGE)
    return genai.Client(api_key=settings.gemini_api_key)


def _first_text(resp: types.GenerateContentResponse) -> str:
    try:
        text = resp.candidates[0].content.parts[0].text
    except (AttributeError, IndexError, TypeError) as exc:
        raise SuggestionError(ErrorKind.PARSING) from exc
    if text is None:
        raise SuggestionError(ErrorKind.PARSING)
    return text


# ───────────── Generation (sync) ─────────────
def generate(
    prompt: str,
    model: str | None = None,
    temperature: float | None = None,
    max_output_tokens: int | None = None,
) -> str:
    """
    Run a single completion and return the first candidate's text.

    Failures are re-raised as `SuggestionError` tagged API, NETWORK or
    PARSING.  No retries.
    """
    model = model or settings.chat_model
    try:
        resp = _client().models.generate_content(
            model=model,
            contents=[prompt],
            config=types.GenerateContentConfig(
                temperature=settings.temperature if temperature is None else temperature,
                max_output_tokens=max_output_tokens or settings.max_output_tokens,
            ),
        )
    except gerrors.APIError as e:
        _LOG.error("Gemini generation failed (%s): %s", getattr(e, "code", "?"), e)
        raise SuggestionError(ErrorKind.API) from e
    except (httpx.TransportError, OSError) as e:
        _LOG.error("Gemini unreachable: %s", e)
        raise SuggestionError(ErrorKind.NETWORK) from e

    text = _first_text(resp)
    _LOG.debug("Raw model response from %s:\n%s", model, text)
    return text
