from __future__ import annotations
from enum import Enum
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# display constant, unrelated to the scaling baseline below
DISPLAY_SERVINGS = 2
# every parsed recipe is assumed to be written for this many servings
BASE_SERVINGS = 4

DEFAULT_MEAL_NAME = "Healthy Meal Suggestion"


class DietaryRestriction(str, Enum):
    vegetarian = "vegetarian"
    vegan = "vegan"
    gluten_free = "gluten-free"
    dairy_free = "dairy-free"
    nut_free = "nut-free"


class TimeConstraint(str, Enum):
    fifteen = "15min"
    thirty = "30min"

    @property
    def prep_time(self) -> str:
        return "15 minutes" if self is TimeConstraint.fifteen else "30 minutes"


class _Record(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class NutritionalInfo(_Record):
    """Per-recipe nutrition; every value is a magnitude plus unit suffix."""
    calories: str = "0"
    protein: str = "0g"
    carbs: str = "0g"
    fat: str = "0g"
    fiber: str = "0g"


def _new_id() -> str:
    return uuid4().hex


class Meal(_Record):
    name: str = DEFAULT_MEAL_NAME
    ingredients: list[str] = []
    instructions: str = ""
    nutritional_info: NutritionalInfo = NutritionalInfo()
    dietary_restrictions: list[DietaryRestriction] = []
    prep_time: str = TimeConstraint.fifteen.prep_time
    servings: int = DISPLAY_SERVINGS
    id: str = Field(default_factory=_new_id)
    original_servings: int = BASE_SERVINGS
    current_servings: int = BASE_SERVINGS
    is_favorite: bool = False

    # as-parsed values; scaling always starts from these
    base_ingredients: list[str] | None = Field(default=None, exclude=True)
    base_nutritional_info: NutritionalInfo | None = Field(default=None, exclude=True)
