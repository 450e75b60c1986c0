"""
core/session.py
────────────────────────────────────────────────────────────────────────
Explicit per-session UI state.

`SessionState` is immutable; every action is a function
(state, input) → new state.  Callers own storage of the latest state.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace

from core.models.meal import Meal
from core.models.shopping import ShoppingList
from core.serving_scaler import scale_meal
from core.shopping_list import build_shopping_list, toggle_item

_LOG = logging.getLogger(__name__)


class NoCurrentMeal(LookupError):
    pass


@dataclass(frozen=True)
class SessionState:
    current_meal: Meal | None = None
    saved_recipes: tuple[Meal, ...] = ()
    shopping_lists: tuple[ShoppingList, ...] = ()
    # token of the most recent suggestion request
    request_id: int = 0

    def require_meal(self) -> Meal:
        if self.current_meal is None:
            raise NoCurrentMeal("no current meal in this session")
        return self.current_meal

    def is_saved(self, meal_id: str) -> bool:
        return any(m.id == meal_id for m in self.saved_recipes)


# ───────────────────────── suggestions ──────────────────────────────
def begin_request(state: SessionState) -> tuple[SessionState, int]:
    """Start a new suggestion request; older in-flight results go stale."""
    token = state.request_id + 1
    return replace(state, request_id=token), token


def apply_suggestion(state: SessionState, token: int, meal: Meal) -> SessionState:
    if token != state.request_id:
        _LOG.info("Dropping stale suggestion %r (request %d, latest %d)",
                  meal.name, token, state.request_id)
        return state
    return replace(state, current_meal=meal)


# ───────────────────────── current meal ─────────────────────────────
def adjust_servings(state: SessionState, servings: int) -> SessionState:
    meal = state.require_meal()
    return replace(state, current_meal=scale_meal(meal, max(1, servings)))


def toggle_favorite(state: SessionState) -> SessionState:
    meal = state.require_meal()
    if state.is_saved(meal.id):
        saved = tuple(m for m in state.saved_recipes if m.id != meal.id)
        current = meal.model_copy(update={"is_favorite": False})
    else:
        current = meal.model_copy(update={"is_favorite": True})
        saved = state.saved_recipes + (current,)
    return replace(state, current_meal=current, saved_recipes=saved)


def select_saved(state: SessionState, meal_id: str) -> SessionState:
    for meal in state.saved_recipes:
        if meal.id == meal_id:
            return replace(state, current_meal=meal)
    raise KeyError(meal_id)


# ───────────────────────── shopping lists ───────────────────────────
def add_shopping_list(state: SessionState) -> SessionState:
    new_list = build_shopping_list(state.require_meal())
    return replace(state, shopping_lists=state.shopping_lists + (new_list,))


def toggle_list_item(state: SessionState, list_index: int, item_index: int) -> SessionState:
    lists = toggle_item(state.shopping_lists, list_index, item_index)
    return replace(state, shopping_lists=tuple(lists))
