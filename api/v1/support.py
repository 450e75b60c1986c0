# api/v1/support.py
from __future__ import annotations

from fastapi import APIRouter, status
from starlette.concurrency import run_in_threadpool

from config import settings
from core.errors import SuggestionError
from core.prompts import support_prompt
from core.support import emotional_label, parse_support_response
from services import gemini
from api.v1.errors import http_error
from api.v1.schemas import SupportOut, SupportRequest

router = APIRouter()


@router.post("", response_model=SupportOut, status_code=status.HTTP_200_OK)
async def get_support(body: SupportRequest) -> SupportOut:
    prompt = support_prompt(body.intensity, body.description)
    try:
        raw = await run_in_threadpool(gemini.generate, prompt, settings.support_model)
    except SuggestionError as exc:
        raise http_error(exc) from exc

    parsed = parse_support_response(raw)
    return SupportOut(
        label=emotional_label(body.intensity),
        message=parsed.message,
        techniques=parsed.techniques,
        next_steps=parsed.next_steps,
    )
