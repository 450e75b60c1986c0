from __future__ import annotations
from typing import Iterable

from core.models.meal import DietaryRestriction, TimeConstraint
from core.support import emotional_label


def meal_prompt(
    time_constraint: TimeConstraint | str,
    dietary_restrictions: Iterable[DietaryRestriction | str] = (),
) -> str:
    diets = [DietaryRestriction(d).value for d in dietary_restrictions]
    diet_clause = f" and is {' and '.join(diets)}" if diets else ""
    return (
        f"Suggest a healthy meal that takes {TimeConstraint(time_constraint).value} "
        f"to prepare{diet_clause}. "
        "Include name, ingredients, instructions, and nutritional information."
    )


def support_prompt(intensity: int, description: str) -> str:
    return f"""As an empathetic AI counselor, provide a supportive response to someone experiencing the following emotional state:
Intensity Level: {intensity}/10 ({emotional_label(intensity)})
Description: {description}

Please provide:
1. A validating and empathetic response
2. 2-3 specific coping techniques they can try right now
3. Gentle next steps for moving forward

Format the response in a structured way that's easy to read."""
