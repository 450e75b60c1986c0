"""
core/ingredient_classifier.py
────────────────────────────────────────────────────────────────────────
Keyword classifier that files a free-text ingredient line under one
grocery aisle.

Patterns are plain substrings (no word boundaries) tested in priority
order; the first hit wins, so "black pepper" lands in Produce before
Spices is ever considered.
"""

from __future__ import annotations

import re

from core.models.shopping import GroceryCategory

# priority order matters; Pantry is deliberately checked after Spices
_PATTERNS: tuple[tuple[GroceryCategory, re.Pattern[str]], ...] = (
    (GroceryCategory.produce,
     re.compile(r"lettuce|tomato|onion|garlic|vegetable|carrot|pepper|cucumber|potato")),
    (GroceryCategory.meat_seafood,
     re.compile(r"chicken|beef|fish|shrimp|pork|meat|salmon")),
    (GroceryCategory.dairy,
     re.compile(r"milk|cheese|yogurt|cream|butter")),
    (GroceryCategory.spices,
     re.compile(r"salt|pepper|spice|powder|cumin|paprika")),
    (GroceryCategory.pantry,
     re.compile(r"flour|rice|pasta|oil|sauce|can|stock|broth")),
)


def categorize_ingredient(ingredient: str) -> GroceryCategory:
    lowered = ingredient.lower()
    for category, pattern in _PATTERNS:
        if pattern.search(lowered):
            return category
    return GroceryCategory.other
