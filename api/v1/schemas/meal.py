from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from core.models.meal import DietaryRestriction, TimeConstraint


class _CamelIn(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SuggestionRequest(_CamelIn):
    time_constraint: TimeConstraint = TimeConstraint.fifteen
    dietary_restrictions: list[DietaryRestriction] = []


class ParseRequest(SuggestionRequest):
    """Parse an already-fetched model reply without calling the model."""
    raw: str = ""


class ServingsUpdate(_CamelIn):
    servings: int = Field(..., ge=1, examples=[2, 6])
