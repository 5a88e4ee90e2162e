"""Saved recipes page."""

import reflex as rx

from chefai.ui.components.layout import error_callout, page_layout
from chefai.ui.components.recipe_card import recipe_details
from chefai.ui.state.i18n_state import I18nState
from chefai.ui.state.recipes_state import RecipesState

_t = I18nState.translations


def saved_recipe_row(item) -> rx.Component:
    return rx.card(
        rx.vstack(
            rx.hstack(
                rx.heading(item.recipe.name, size="4"),
                rx.spacer(),
                rx.text(item.created_at, size="1", color="gray"),
                rx.icon_button(
                    rx.cond(
                        RecipesState.expanded_id == item.id,
                        rx.icon("chevron-up", size=16),
                        rx.icon("chevron-down", size=16),
                    ),
                    on_click=RecipesState.toggle_expanded(item.id),
                    variant="ghost",
                ),
                align="center",
                width="100%",
            ),
            rx.cond(
                RecipesState.expanded_id == item.id,
                rx.vstack(
                    recipe_details(item.recipe),
                    rx.hstack(
                        rx.button(
                            rx.icon("share-2", size=16),
                            rx.cond(
                                RecipesState.published_id == item.id,
                                _t["common.published"],
                                _t["common.publish"],
                            ),
                            on_click=RecipesState.publish_recipe(item.id),
                            disabled=RecipesState.published_id == item.id,
                            variant="outline",
                        ),
                        rx.button(
                            rx.icon("trash-2", size=16),
                            _t["common.delete"],
                            on_click=RecipesState.delete_recipe(item.id),
                            color_scheme="red",
                            variant="soft",
                        ),
                        spacing="2",
                    ),
                    spacing="3",
                    width="100%",
                ),
            ),
            spacing="2",
            width="100%",
        ),
        width="100%",
    )


def my_recipes_page() -> rx.Component:
    return page_layout(
        error_callout(RecipesState.error_message),
        rx.cond(
            RecipesState.has_recipes,
            rx.vstack(
                rx.foreach(RecipesState.recipes, saved_recipe_row),
                spacing="3",
                width="100%",
            ),
            rx.text(_t["my_recipes.empty"], color="gray"),
        ),
        title=_t["my_recipes.title"],
    )
