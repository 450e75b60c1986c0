# tests/test_response_parser.py
from __future__ import annotations

from core.models.meal import DietaryRestriction, NutritionalInfo, TimeConstraint
from core.response_parser import Section, clean_ingredient, detect_header, parse_meal_response

GREEK_SALAD = """\
Name: Greek Salad
Ingredients:
- 1 cup cucumber
- 2 tbsp olive oil
Instructions:
Chop vegetables. Toss with oil.
Nutritional Information:
Calories: 350 - 400
Protein: 10 - 12
"""

MARKDOWN_REPLY = """\
**Name:** Lemon Chickpea Bowl

**Ingredients:**
* 1 can chickpeas
• 1 lemon
-   2 cups spinach
-

**Instructions:**
1. Drain the chickpeas.

2. Toss everything together.

**Nutritional Information (per serving):**
* calories: 420
* Carbohydrates: 45 - 50
* Fat: 12g
* Fiber: 9g
"""


# ── the worked example ──────────────────────────────────────────────
def test_greek_salad_example():
    meal = parse_meal_response(GREEK_SALAD)

    assert meal.name == "Greek Salad"
    assert meal.ingredients == ["1 cup cucumber", "2 tbsp olive oil"]
    assert meal.instructions == "Chop vegetables. Toss with oil."
    info = meal.nutritional_info
    assert info.calories == "350"
    assert info.protein == "10g"
    assert (info.carbs, info.fat, info.fiber) == ("0g", "0g", "0g")


def test_markdown_and_bullets_are_stripped():
    meal = parse_meal_response(MARKDOWN_REPLY)

    assert meal.name == "Lemon Chickpea Bowl"
    assert meal.ingredients == ["1 can chickpeas", "1 lemon", "2 cups spinach"]
    assert meal.instructions == "1. Drain the chickpeas.\n2. Toss everything together."
    assert meal.nutritional_info.calories == "420"
    assert meal.nutritional_info.carbs == "45g"


def test_fat_and_fiber_are_never_extracted():
    info = parse_meal_response(MARKDOWN_REPLY).nutritional_info
    assert info.fat == "0g"
    assert info.fiber == "0g"


# ── name handling ───────────────────────────────────────────────────
def test_name_found_anywhere():
    raw = "Ingredients:\n- 1 onion\nName:  Onion Soup  \n- 2 cups broth"
    meal = parse_meal_response(raw)
    assert meal.name == "Onion Soup"
    # the name line does not end the ingredients section
    assert meal.ingredients == ["1 onion", "2 cups broth"]


def test_name_in_other_casing():
    assert parse_meal_response("MEAL NAME: Tofu Scramble").name == "Tofu Scramble"


def test_missing_name_falls_back():
    assert parse_meal_response("Ingredients:\n- rice").name == "Healthy Meal Suggestion"


# ── sections ────────────────────────────────────────────────────────
def test_header_does_not_reset_other_sections():
    raw = (
        "Ingredients:\n- 1 egg\n"
        "Instructions:\nWhisk.\n"
        "Ingredients:\n- 1 pinch salt\n"
    )
    meal = parse_meal_response(raw)
    assert meal.ingredients == ["1 egg", "1 pinch salt"]
    assert meal.instructions == "Whisk."


def test_no_ingredients_section_gives_empty_list():
    meal = parse_meal_response("Name: Mystery\nJust eat something nice.")
    assert meal.ingredients == []
    assert meal.instructions == ""


def test_nutrition_lines_outside_nutrition_section_are_ignored():
    meal = parse_meal_response("Calories: 900\nProtein: 50")
    assert meal.nutritional_info == NutritionalInfo()


def test_detect_header_priority():
    assert detect_header("Ingredients: and Instructions:") is Section.INGREDIENTS
    assert detect_header("Nutritional Information") is Section.NUTRITION
    assert detect_header("Chop the onion") is None


def test_clean_ingredient_drops_only_one_bullet():
    assert clean_ingredient("- - 1 cup milk") == "- 1 cup milk"
    assert clean_ingredient("•") == ""


# ── totality / defaults ─────────────────────────────────────────────
def test_empty_and_none_input():
    for raw in ("", None, "\n\n   \n"):
        meal = parse_meal_response(raw)
        assert meal.name == "Healthy Meal Suggestion"
        assert meal.ingredients == []
        assert meal.nutritional_info.calories == "0"
        assert meal.nutritional_info.protein == "0g"


def test_empty_nutrition_value_keeps_default():
    meal = parse_meal_response("Nutritional Information:\nCalories:\nProtein: - 5")
    assert meal.nutritional_info.calories == "0"
    assert meal.nutritional_info.protein == "0g"


def test_request_config_is_copied_not_parsed():
    meal = parse_meal_response(
        GREEK_SALAD,
        TimeConstraint.thirty,
        [DietaryRestriction.vegan, "gluten-free"],
    )
    assert meal.prep_time == "30 minutes"
    assert meal.dietary_restrictions == [DietaryRestriction.vegan, DietaryRestriction.gluten_free]


def test_serving_counters_and_identity():
    a = parse_meal_response(GREEK_SALAD)
    b = parse_meal_response(GREEK_SALAD)

    assert a.servings == 2
    assert a.original_servings == 4
    assert a.current_servings == 4
    assert a.is_favorite is False
    assert a.id and a.id != b.id
