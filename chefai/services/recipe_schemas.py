"""Recipe and meal-plan payloads shared by the AI flows and storage services.

These models double as structured-output schemas for the generative API, so
list and object fields are required rather than defaulted.
"""

from pydantic import BaseModel, Field

MEALS = ("breakfast", "lunch", "main_course", "dinner")


class NutritionalInfo(BaseModel):
    calories: str = Field(description="Estimated calories per serving.")
    protein: str = Field(description="Estimated protein in grams per serving.")
    carbs: str = Field(description="Estimated carbohydrates in grams per serving.")
    fats: str = Field(description="Estimated fats in grams per serving.")


class Recipe(BaseModel):
    name: str = Field(description="The name of the recipe.")
    ingredients: list[str] = Field(description="Each ingredient with its quantity.")
    instructions: list[str] = Field(description="Numbered preparation steps.")
    equipment: list[str] = Field(description="Needed pieces of kitchen equipment.")
    benefits: str | None = Field(None, description="Nutritional or health benefits.")
    nutritional_table: NutritionalInfo | None = Field(
        None, description="Estimated nutritional table per serving."
    )


def empty_recipe() -> Recipe:
    return Recipe(name="", ingredients=[], instructions=[], equipment=[])


class DailyMealPlan(BaseModel):
    day: str = Field(description='The day label, e.g. "Day 1".')
    breakfast: Recipe
    lunch: Recipe = Field(description="A light lunch.")
    main_course: Recipe = Field(description="The main meal of the day.")
    dinner: Recipe


class WeeklyMealPlan(BaseModel):
    weekly_meal_plan: list[DailyMealPlan]


class ShoppingListCategory(BaseModel):
    category: str = Field(description='Store section, e.g. "Fruits and Vegetables".')
    items: list[str] = Field(description="Ingredient names without quantities.")


class ShoppingList(BaseModel):
    shopping_list: list[ShoppingListCategory]


def normalize_lines(value) -> list[str]:
    """Coerce a stored list-or-text field into a list of non-blank lines."""
    if isinstance(value, list):
        return [str(v) for v in value]
    if isinstance(value, str):
        return [line for line in value.split("\n") if line.strip()]
    return []


def normalize_recipe(raw: dict | None) -> Recipe:
    if not raw:
        return empty_recipe()
    table = raw.get("nutritional_table")
    nutrition = None
    if isinstance(table, dict):
        nutrition = NutritionalInfo(
            **{key: str(table.get(key) or "") for key in NutritionalInfo.model_fields}
        )
    return Recipe(
        name=raw.get("name") or "",
        ingredients=normalize_lines(raw.get("ingredients")),
        instructions=normalize_lines(raw.get("instructions")),
        equipment=normalize_lines(raw.get("equipment")),
        benefits=raw.get("benefits") or None,
        nutritional_table=nutrition,
    )


def normalize_plan(raw: list | None) -> list[DailyMealPlan]:
    if not isinstance(raw, list):
        return []
    days = []
    for day in raw:
        if not day:
            continue
        days.append(
            DailyMealPlan(
                day=day.get("day") or "",
                **{meal: normalize_recipe(day.get(meal)) for meal in MEALS},
            )
        )
    return days
