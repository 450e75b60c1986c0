# api/v1/meals.py
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from starlette.concurrency import run_in_threadpool

from core import session as ss
from core.errors import ErrorKind, SuggestionError
from core.models.meal import DietaryRestriction, Meal, TimeConstraint
from core.prompts import meal_prompt
from core.response_parser import parse_meal_response
from services import gemini
from services.store import DEFAULT_SESSION, SessionStore, get_store
from api.v1.errors import http_error
from api.v1.schemas import ParseRequest, ServingsUpdate, SuggestionRequest

_LOG = logging.getLogger(__name__)

router = APIRouter()


# ───────────────────────── helpers ──────────────────────────
def _parse(raw: str, tc: TimeConstraint, diets: list[DietaryRestriction]) -> Meal:
    try:
        return parse_meal_response(raw, tc, diets)
    except Exception as exc:
        # the parser is total; reaching this is a bug in its defaults
        _LOG.exception("Parser failed on model output")
        raise http_error(SuggestionError(ErrorKind.PARSING)) from exc


def _no_meal() -> HTTPException:
    return HTTPException(status_code=404, detail="No current meal")


# ───────────────────────── suggest ──────────────────────────
@router.post(
    "/suggestions",
    response_model=Meal,
    status_code=status.HTTP_201_CREATED,
    summary="Ask the model for a meal and make it the current meal",
)
async def suggest_meal(
    body: SuggestionRequest,
    session_id: str = DEFAULT_SESSION,
    store: SessionStore = Depends(get_store),
) -> Meal:
    state, token = ss.begin_request(store.get(session_id))
    store.put(session_id, state)

    prompt = meal_prompt(body.time_constraint, body.dietary_restrictions)
    try:
        raw = await run_in_threadpool(gemini.generate, prompt)
    except SuggestionError as exc:
        raise http_error(exc) from exc

    meal = _parse(raw, body.time_constraint, body.dietary_restrictions)

    # re-read: another request may have started while we waited
    latest = store.get(session_id)
    updated = store.put(session_id, ss.apply_suggestion(latest, token, meal))
    if updated.current_meal is not meal:
        raise HTTPException(status_code=409, detail="Superseded by a newer suggestion request")
    return meal


@router.post(
    "/parse",
    response_model=Meal,
    status_code=status.HTTP_200_OK,
    summary="Parse a raw model reply without calling the model",
)
async def parse_meal(body: ParseRequest) -> Meal:
    return _parse(body.raw, body.time_constraint, body.dietary_restrictions)


# ───────────────────────── current meal ─────────────────────
@router.get("/current", response_model=Meal)
async def current_meal(
    session_id: str = DEFAULT_SESSION,
    store: SessionStore = Depends(get_store),
) -> Meal:
    meal = store.get(session_id).current_meal
    if meal is None:
        raise _no_meal()
    return meal


@router.put("/current/servings", response_model=Meal)
async def adjust_servings(
    body: ServingsUpdate,
    session_id: str = DEFAULT_SESSION,
    store: SessionStore = Depends(get_store),
) -> Meal:
    try:
        state = ss.adjust_servings(store.get(session_id), body.servings)
    except ss.NoCurrentMeal as exc:
        raise _no_meal() from exc
    return store.put(session_id, state).current_meal


@router.post("/current/favorite", response_model=Meal)
async def toggle_favorite(
    session_id: str = DEFAULT_SESSION,
    store: SessionStore = Depends(get_store),
) -> Meal:
    try:
        state = ss.toggle_favorite(store.get(session_id))
    except ss.NoCurrentMeal as exc:
        raise _no_meal() from exc
    return store.put(session_id, state).current_meal


# ───────────────────────── saved recipes ────────────────────
@router.get("/saved", response_model=list[Meal])
async def list_saved(
    session_id: str = DEFAULT_SESSION,
    store: SessionStore = Depends(get_store),
) -> list[Meal]:
    return list(store.get(session_id).saved_recipes)


@router.post("/saved/{meal_id}/select", response_model=Meal)
async def select_saved(
    meal_id: str,
    session_id: str = DEFAULT_SESSION,
    store: SessionStore = Depends(get_store),
) -> Meal:
    try:
        state = ss.select_saved(store.get(session_id), meal_id)
    except KeyError as exc:
        raise HTTPException(status_code=404, detail="Saved meal not found") from exc
    return store.put(session_id, state).current_meal
