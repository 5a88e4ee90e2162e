"""Recipe and meal-plan display components."""

from collections.abc import Callable

import reflex as rx

from chefai.ui.state.i18n_state import I18nState

_t = I18nState.translations


def _bullet_list(items: rx.Var[list[str]]) -> rx.Component:
    return rx.vstack(
        rx.foreach(items, lambda item: rx.text(item, size="2")),
        spacing="1",
        width="100%",
    )


def nutrition_table(recipe) -> rx.Component:
    return rx.cond(
        recipe.has_nutrition,
        rx.vstack(
            rx.text(_t["recipe.nutrition"], weight="bold", size="2"),
            rx.hstack(
                rx.badge(_t["recipe.calories"], ": ", recipe.calories, variant="soft"),
                rx.badge(_t["recipe.protein"], ": ", recipe.protein, variant="soft"),
                rx.badge(_t["recipe.carbs"], ": ", recipe.carbs, variant="soft"),
                rx.badge(_t["recipe.fats"], ": ", recipe.fats, variant="soft"),
                spacing="2",
                wrap="wrap",
            ),
            spacing="1",
        ),
    )


def recipe_details(recipe) -> rx.Component:
    """Ingredients, steps, equipment, benefits and nutrition of a ``RecipeItem`` var."""
    return rx.vstack(
        rx.text(_t["recipe.ingredients"], weight="bold", size="2"),
        _bullet_list(recipe.ingredients),
        rx.text(_t["recipe.instructions"], weight="bold", size="2"),
        _bullet_list(recipe.instructions),
        rx.cond(
            recipe.equipment.length() > 0,
            rx.vstack(
                rx.text(_t["recipe.equipment"], weight="bold", size="2"),
                rx.text(recipe.equipment.join(", "), size="2"),
                spacing="1",
            ),
        ),
        rx.cond(
            recipe.benefits != "",
            rx.vstack(
                rx.text(_t["recipe.benefits"], weight="bold", size="2"),
                rx.text(recipe.benefits, size="2", color="gray"),
                spacing="1",
            ),
        ),
        nutrition_table(recipe),
        spacing="2",
        width="100%",
    )


def recipe_card(recipe, *actions: rx.Component) -> rx.Component:
    return rx.card(
        rx.vstack(
            rx.heading(recipe.name, size="5"),
            recipe_details(recipe),
            rx.hstack(*actions, spacing="2", wrap="wrap"),
            spacing="3",
            width="100%",
        ),
        width="100%",
    )


def _meal_row(label: rx.Var[str], meal, on_detail: Callable | None) -> rx.Component:
    return rx.hstack(
        rx.badge(label, variant="soft", min_width="110px"),
        rx.text(meal.name, size="2", flex="1"),
        on_detail() if on_detail is not None else rx.fragment(),
        align="center",
        width="100%",
    )


def meal_plan(
    days, on_detail: Callable[[rx.Var, str], rx.Component] | None = None
) -> rx.Component:
    """Grid of days with their four meals.

    ``on_detail(index, meal)`` builds an optional action shown next to each meal.
    """

    def day_card(day, index) -> rx.Component:
        def action(meal: str):
            if on_detail is None:
                return None
            return lambda: on_detail(index, meal)

        return rx.card(
            rx.vstack(
                rx.heading(day.day, size="3"),
                _meal_row(_t["meal.breakfast"], day.breakfast, action("breakfast")),
                _meal_row(_t["meal.lunch"], day.lunch, action("lunch")),
                rx.cond(
                    day.main_course.name != "",
                    _meal_row(_t["meal.main_course"], day.main_course, action("main_course")),
                ),
                _meal_row(_t["meal.dinner"], day.dinner, action("dinner")),
                spacing="2",
                width="100%",
            ),
            width="100%",
        )

    return rx.vstack(rx.foreach(days, day_card), spacing="3", width="100%")
