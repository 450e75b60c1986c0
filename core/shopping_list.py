"""
core/shopping_list.py
────────────────────────────────────────────────────────────────────────
Build, tick off and export per-recipe shopping lists.
"""

from __future__ import annotations

import logging
from typing import Sequence

from core.ingredient_classifier import categorize_ingredient
from core.models.meal import Meal
from core.models.shopping import DISPLAY_ORDER, GroceryItem, ShoppingList

_LOG = logging.getLogger(__name__)


def build_shopping_list(meal: Meal) -> ShoppingList:
    """One unchecked item per ingredient line, in recipe order."""
    items = [
        GroceryItem(name=ingredient, category=categorize_ingredient(ingredient))
        for ingredient in meal.ingredients
    ]
    _LOG.debug("Built shopping list for %r with %d items", meal.name, len(items))
    return ShoppingList(items=items, recipe_id=meal.id, recipe_name=meal.name)


def toggle_item(
    lists: Sequence[ShoppingList],
    list_index: int,
    item_index: int,
) -> list[ShoppingList]:
    """
    Return a copy of `lists` with a single item's `checked` flag flipped.

    Indices are positional and must be in range (no negative indexing);
    anything else raises `IndexError`.
    """
    if not 0 <= list_index < len(lists):
        raise IndexError(f"no shopping list at index {list_index}")
    target = lists[list_index]
    if not 0 <= item_index < len(target.items):
        raise IndexError(f"no item at index {item_index} in list {list_index}")

    items = list(target.items)
    item = items[item_index]
    items[item_index] = item.model_copy(update={"checked": not item.checked})

    updated = list(lists)
    updated[list_index] = target.model_copy(update={"items": items})
    return updated


def export_list(shopping_list: ShoppingList) -> str:
    paragraphs = []
    for category in DISPLAY_ORDER:
        names = [i.name for i in shopping_list.items if i.category == category]
        if not names:
            continue
        lines = "\n".join(f"- {name}" for name in names)
        paragraphs.append(f"{category.value}:\n{lines}\n")
    return f"Shopping List for {shopping_list.recipe_name}\n\n" + "\n".join(paragraphs)


def export_filename(shopping_list: ShoppingList) -> str:
    return f"shopping-list-{shopping_list.recipe_name}.txt"
