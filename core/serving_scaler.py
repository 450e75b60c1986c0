"""
core/serving_scaler.py
────────────────────────────────────────────────────────────────────────
Rescale a `Meal` to a new serving count.

ratio = requested / original_servings, applied to the as-parsed
ingredient lines and nutrition so repeated adjustments never compound.
"""

from __future__ import annotations

import logging
import math
import re
from decimal import ROUND_HALF_UP, Decimal

from core.models.meal import Meal, NutritionalInfo

_LOG = logging.getLogger(__name__)

# "<amount> <unit> <rest>"; unit must start with a letter
_QUANTITY = re.compile(r"^(\d+(?:\.\d+)?|\.\d+)\s*([^\W\d_]\w*)\s+(.+)$")
_LEADING_FLOAT = re.compile(r"^\s*[-+]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][-+]?\d+)?")

_NUTRIENTS = ("calories", "protein", "carbs", "fat", "fiber")


def _one_decimal(x: float) -> str:
    # half-up at one decimal, applied to the exact binary value of x
    return str(Decimal(x).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def scale_ingredient(ingredient: str, ratio: float) -> str:
    """Rescale the leading amount; lines without one pass through untouched."""
    match = _QUANTITY.match(ingredient)
    if not match:
        return ingredient
    amount, unit, rest = match.groups()
    return f"{_one_decimal(float(amount) * ratio)} {unit} {rest}"


def leading_magnitude(value: str) -> float:
    """Leading number of `value` ("350 kcal" → 350.0); 0.0 when there is none."""
    match = _LEADING_FLOAT.match(value)
    return float(match.group(0)) if match else 0.0


def _round_half_up(x: float) -> int:
    return math.floor(x + 0.5)


def scale_nutrition(info: NutritionalInfo, ratio: float) -> NutritionalInfo:
    # every field, calories included, comes back with a grams suffix
    return NutritionalInfo(**{
        field: f"{_round_half_up(leading_magnitude(getattr(info, field)) * ratio)}g"
        for field in _NUTRIENTS
    })


def scale_meal(meal: Meal, servings: int) -> Meal:
    if servings < 1:
        raise ValueError(f"servings must be at least 1, got {servings}")

    ratio = servings / meal.original_servings
    base_ingredients = meal.base_ingredients if meal.base_ingredients is not None else meal.ingredients
    base_nutrition = meal.base_nutritional_info or meal.nutritional_info

    _LOG.debug("Scaling %r to %d servings (ratio %.3f)", meal.name, servings, ratio)
    return meal.model_copy(update={
        "current_servings": servings,
        "ingredients": [scale_ingredient(i, ratio) for i in base_ingredients],
        "nutritional_info": scale_nutrition(base_nutrition, ratio),
        "base_ingredients": list(base_ingredients),
        "base_nutritional_info": base_nutrition,
    })
