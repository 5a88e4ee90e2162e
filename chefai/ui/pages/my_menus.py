"""Saved weekly menus page with per-meal detailed recipes."""

import reflex as rx

from chefai.ui.components.layout import error_callout, page_layout
from chefai.ui.components.recipe_card import meal_plan, recipe_card
from chefai.ui.state.i18n_state import I18nState
from chefai.ui.state.menus_state import MenusState

_t = I18nState.translations


def notice_callout() -> rx.Component:
    return rx.cond(
        MenusState.notice != "",
        rx.callout(
            rx.match(
                MenusState.notice,
                ("published", _t["my_menus.notice_published"]),
                ("recipe_saved", _t["my_menus.notice_recipe_saved"]),
                ("menu_updated", _t["my_menus.notice_menu_updated"]),
                "",
            ),
            icon="circle_check",
            color_scheme="green",
            width="100%",
        ),
    )


def detail_button(index, meal: str) -> rx.Component:
    return rx.button(
        _t["my_menus.detail"],
        size="1",
        variant="soft",
        on_click=MenusState.expand_meal(index, meal),
        disabled=MenusState.is_working,
    )


def detailed_recipe_panel() -> rx.Component:
    return rx.cond(
        MenusState.has_detailed_recipe,
        recipe_card(
            MenusState.detailed_recipe,
            rx.button(
                rx.icon("save", size=16),
                _t["my_menus.save_recipe"],
                on_click=MenusState.save_detailed_recipe,
            ),
            rx.button(
                rx.icon("replace", size=16),
                _t["my_menus.replace_meal"],
                on_click=MenusState.replace_meal_with_detail,
                variant="outline",
            ),
            rx.button(_t["common.close"], on_click=MenusState.close_detail, variant="ghost"),
        ),
        rx.cond(MenusState.is_working, rx.center(rx.spinner(size="3"), width="100%")),
    )


def menu_row(menu) -> rx.Component:
    return rx.card(
        rx.vstack(
            rx.hstack(
                rx.vstack(
                    rx.text(menu.created_at, weight="bold"),
                    rx.text(
                        menu.number_of_days,
                        " ",
                        _t["my_menus.days"],
                        " · ",
                        menu.number_of_people,
                        " ",
                        _t["my_menus.people"],
                        size="2",
                        color="gray",
                    ),
                    rx.cond(
                        menu.dietary_preferences != "",
                        rx.badge(menu.dietary_preferences, variant="soft"),
                    ),
                    spacing="1",
                ),
                rx.spacer(),
                rx.button(
                    rx.cond(
                        MenusState.selected_id == menu.id,
                        _t["common.close"],
                        _t["my_menus.open"],
                    ),
                    on_click=MenusState.select_menu(menu.id),
                    variant="outline",
                ),
                rx.button(
                    rx.icon("share-2", size=16),
                    _t["common.publish"],
                    on_click=MenusState.publish_menu(menu.id),
                    variant="outline",
                ),
                rx.button(
                    rx.icon("shopping-cart", size=16),
                    _t["planner.shopping_list"],
                    on_click=MenusState.shopping_list_from_menu(menu.id),
                    disabled=MenusState.is_working,
                    variant="outline",
                ),
                rx.icon_button(
                    rx.icon("trash-2", size=16),
                    on_click=MenusState.delete_menu(menu.id),
                    color_scheme="red",
                    variant="soft",
                ),
                align="center",
                width="100%",
                wrap="wrap",
            ),
            rx.cond(
                MenusState.selected_id == menu.id,
                rx.vstack(
                    detailed_recipe_panel(),
                    meal_plan(menu.days, on_detail=detail_button),
                    spacing="3",
                    width="100%",
                ),
            ),
            spacing="3",
            width="100%",
        ),
        width="100%",
    )


def my_menus_page() -> rx.Component:
    return page_layout(
        error_callout(MenusState.error_message),
        notice_callout(),
        rx.cond(
            MenusState.menus.length() > 0,
            rx.vstack(rx.foreach(MenusState.menus, menu_row), spacing="3", width="100%"),
            rx.text(_t["my_menus.empty"], color="gray"),
        ),
        title=_t["my_menus.title"],
    )
