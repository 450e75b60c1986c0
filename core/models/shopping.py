from __future__ import annotations
from enum import Enum

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class GroceryCategory(str, Enum):
    produce = "Produce"
    meat_seafood = "Meat & Seafood"
    dairy = "Dairy"
    pantry = "Pantry"
    spices = "Spices"
    other = "Other"


# export order; declaration order above matches it
DISPLAY_ORDER: tuple[GroceryCategory, ...] = tuple(GroceryCategory)


class GroceryItem(BaseModel):
    name: str
    category: GroceryCategory = GroceryCategory.other
    checked: bool = False

    model_config = ConfigDict(frozen=True)


class ShoppingList(BaseModel):
    items: list[GroceryItem] = []
    recipe_id: str
    recipe_name: str

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)
