# tests/test_session.py
from __future__ import annotations

import pytest

from core import session as ss
from core.response_parser import parse_meal_response

RAW = "Name: Pasta\nIngredients:\n- 200g pasta\n- 1 cup tomato sauce"

MEAL = parse_meal_response(RAW)


def _with_meal() -> ss.SessionState:
    state, token = ss.begin_request(ss.SessionState())
    return ss.apply_suggestion(state, token, MEAL)


# ── suggestions ─────────────────────────────────────────────────────
def test_latest_request_wins():
    state, first = ss.begin_request(ss.SessionState())
    state, second = ss.begin_request(state)

    newer = parse_meal_response("Name: Newer")
    state = ss.apply_suggestion(state, second, newer)
    state = ss.apply_suggestion(state, first, MEAL)  # late arrival

    assert state.current_meal is newer


def test_apply_current_token():
    assert _with_meal().current_meal is MEAL


# ── servings ────────────────────────────────────────────────────────
def test_adjust_servings_clamps_to_one():
    state = ss.adjust_servings(_with_meal(), 0)
    assert state.current_meal.current_servings == 1
    assert state.current_meal.original_servings == 4


def test_actions_without_meal_raise():
    empty = ss.SessionState()
    for action in (ss.toggle_favorite, ss.add_shopping_list):
        with pytest.raises(ss.NoCurrentMeal):
            action(empty)
    with pytest.raises(ss.NoCurrentMeal):
        ss.adjust_servings(empty, 2)


# ── favorites ───────────────────────────────────────────────────────
def test_toggle_favorite_adds_then_removes():
    state = ss.toggle_favorite(_with_meal())
    assert state.current_meal.is_favorite is True
    assert [m.id for m in state.saved_recipes] == [MEAL.id]
    assert state.saved_recipes[0].is_favorite is True

    state = ss.toggle_favorite(state)
    assert state.saved_recipes == ()
    assert state.current_meal.is_favorite is False


def test_select_saved():
    state = ss.toggle_favorite(_with_meal())
    state, token = ss.begin_request(state)
    state = ss.apply_suggestion(state, token, parse_meal_response("Name: Other"))

    state = ss.select_saved(state, MEAL.id)
    assert state.current_meal.name == "Pasta"

    with pytest.raises(KeyError):
        ss.select_saved(state, "missing")


# ── shopping lists ──────────────────────────────────────────────────
def test_lists_accumulate_without_merging():
    state = ss.add_shopping_list(ss.add_shopping_list(_with_meal()))
    assert len(state.shopping_lists) == 2
    assert all(sl.recipe_id == MEAL.id for sl in state.shopping_lists)

    state = ss.toggle_list_item(state, 0, 1)
    assert state.shopping_lists[0].items[1].checked is True
    assert state.shopping_lists[1].items[1].checked is False
