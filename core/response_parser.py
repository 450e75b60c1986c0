"""
core/response_parser.py
────────────────────────────────────────────────────────────────────────
Turns the model's free-text meal suggestion into a `Meal`.

The parser is a single forward pass over the lines driven by an explicit
`Section` state.  Per line the checks run in a fixed order:

1.  `name:`                    – anywhere, independent of the section
2.  `ingredients:`             – section header
3.  `instructions:`            – section header
4.  `nutritional information`  – section header
5.  content of the current section

It never raises: anything missing or malformed keeps its default.
"""

from __future__ import annotations

import logging
import re
from enum import Enum
from typing import Iterable

from core.models.meal import (
    BASE_SERVINGS,
    DEFAULT_MEAL_NAME,
    DISPLAY_SERVINGS,
    DietaryRestriction,
    Meal,
    NutritionalInfo,
    TimeConstraint,
)

_LOG = logging.getLogger(__name__)

_BULLETS = ("•", "-", "*")

_CALORIES = re.compile(r"calories:", re.IGNORECASE)
_PROTEIN = re.compile(r"protein:", re.IGNORECASE)
_CARBS = re.compile(r"carbs:|carbohydrates:", re.IGNORECASE)


class Section(str, Enum):
    NONE = "none"
    INGREDIENTS = "ingredients"
    INSTRUCTIONS = "instructions"
    NUTRITION = "nutrition"


# header triggers, checked in this order
_HEADERS: tuple[tuple[str, Section], ...] = (
    ("ingredients:", Section.INGREDIENTS),
    ("instructions:", Section.INSTRUCTIONS),
    ("nutritional information", Section.NUTRITION),
)


# ───────────────────────── line helpers ─────────────────────────────
def clean_line(line: str) -> str:
    """Trim and drop markdown emphasis (every asterisk)."""
    return line.strip().replace("*", "")


def detect_header(line: str) -> Section | None:
    lowered = line.lower()
    for trigger, section in _HEADERS:
        if trigger in lowered:
            return section
    return None


def extract_name(line: str) -> str:
    # literal marker first, any casing as a fallback
    if "Name:" in line:
        return line.partition("Name:")[2].strip()
    return re.split(r"name:", line, maxsplit=1, flags=re.IGNORECASE)[-1].strip()


def clean_ingredient(line: str) -> str:
    if line.startswith(_BULLETS):
        line = line[1:]
    return line.replace("*", "").strip()


def _value_after(marker: re.Pattern[str], line: str) -> str:
    """Text between `marker` and the first following hyphen, trimmed."""
    parts = marker.split(line, maxsplit=1)
    if len(parts) < 2:
        return ""
    return parts[1].split("-", 1)[0].strip()


# ───────────────────────── parser ───────────────────────────────────
class _MealDraft:
    """Mutable accumulator for one pass; frozen into a `Meal` at the end."""

    def __init__(self) -> None:
        self.section = Section.NONE
        self.name = ""
        self.ingredients: list[str] = []
        self.instructions = ""
        self.nutrition: dict[str, str] = {}

    def feed(self, line: str) -> None:
        if "name:" in line.lower():
            name = extract_name(line)
            if name:
                self.name = name
                _LOG.debug("Found name: %s", name)
            return

        header = detect_header(line)
        if header is not None:
            _LOG.debug("Switching to %s section", header.value)
            self.section = header
            return

        if not line:
            return

        if self.section is Section.INGREDIENTS:
            ingredient = clean_ingredient(line)
            if ingredient:
                self.ingredients.append(ingredient)
        elif self.section is Section.INSTRUCTIONS:
            self.instructions += line + "\n"
        elif self.section is Section.NUTRITION:
            self._feed_nutrition(line)

    def _feed_nutrition(self, line: str) -> None:
        lowered = line.lower()
        if "calories:" in lowered:
            value = _value_after(_CALORIES, line)
            if value:
                self.nutrition["calories"] = value
        elif "protein:" in lowered:
            value = _value_after(_PROTEIN, line)
            if value:
                self.nutrition["protein"] = value + "g"
        elif "carbs:" in lowered or "carbohydrates:" in lowered:
            value = _value_after(_CARBS, line)
            if value:
                self.nutrition["carbs"] = value + "g"
        # fat / fiber: no extraction rule, defaults stand

    def build(
        self,
        time_constraint: TimeConstraint,
        dietary_restrictions: list[DietaryRestriction],
    ) -> Meal:
        nutrition = NutritionalInfo(**self.nutrition)
        return Meal(
            name=self.name or DEFAULT_MEAL_NAME,
            ingredients=self.ingredients,
            instructions=self.instructions.strip(),
            nutritional_info=nutrition,
            dietary_restrictions=dietary_restrictions,
            prep_time=time_constraint.prep_time,
            servings=DISPLAY_SERVINGS,
            original_servings=BASE_SERVINGS,
            current_servings=BASE_SERVINGS,
            is_favorite=False,
            base_ingredients=list(self.ingredients),
            base_nutritional_info=nutrition,
        )


def parse_meal_response(
    raw: str | None,
    time_constraint: TimeConstraint | str = TimeConstraint.fifteen,
    dietary_restrictions: Iterable[DietaryRestriction | str] = (),
) -> Meal:
    """
    Parse a raw model reply into a fresh `Meal`.

    `time_constraint` and `dietary_restrictions` come from the request,
    not from the text; they are copied onto the record as-is.
    """
    draft = _MealDraft()
    for line in (raw or "").splitlines():
        draft.feed(clean_line(line))

    meal = draft.build(
        TimeConstraint(time_constraint),
        [DietaryRestriction(d) for d in dietary_restrictions],
    )
    _LOG.debug(
        "Parsed meal %r: %d ingredients, nutrition=%s",
        meal.name, len(meal.ingredients), meal.nutritional_info.model_dump(),
    )
    return meal
