"""Shopping list page."""

import reflex as rx

from chefai.ui.components.layout import error_callout, page_layout
from chefai.ui.state.i18n_state import I18nState
from chefai.ui.state.shopping_list_state import ShoppingListState

_t = I18nState.translations


def item_row(item) -> rx.Component:
    return rx.hstack(
        rx.checkbox(
            checked=item.checked,
            on_change=lambda _: ShoppingListState.toggle_item(item.id),
        ),
        rx.text(
            item.name,
            size="2",
            text_decoration=rx.cond(item.checked, "line-through", "none"),
            color=rx.cond(item.checked, "gray", "inherit"),
            flex="1",
        ),
        rx.icon_button(
            rx.icon("x", size=14),
            on_click=ShoppingListState.remove_item(item.id),
            variant="ghost",
            size="1",
        ),
        align="center",
        width="100%",
    )


def category_card(category) -> rx.Component:
    return rx.card(
        rx.vstack(
            rx.heading(category.name, size="3"),
            rx.foreach(category.items, item_row),
            spacing="2",
            width="100%",
        ),
        width="100%",
    )


def add_item_form() -> rx.Component:
    return rx.hstack(
        rx.input(
            placeholder=_t["shopping.ph_category"],
            value=ShoppingListState.form_category,
            on_change=ShoppingListState.set_form_category,
        ),
        rx.input(
            placeholder=_t["shopping.ph_item"],
            value=ShoppingListState.form_name,
            on_change=ShoppingListState.set_form_name,
            flex="1",
        ),
        rx.button(rx.icon("plus", size=16), _t["shopping.add"], on_click=ShoppingListState.add_item),
        width="100%",
    )


def shopping_list_page() -> rx.Component:
    return page_layout(
        error_callout(ShoppingListState.error_message),
        add_item_form(),
        rx.hstack(
            rx.text(
                ShoppingListState.checked_count,
                " / ",
                ShoppingListState.item_count,
                " ",
                _t["shopping.checked"],
                size="2",
                color="gray",
            ),
            rx.spacer(),
            rx.button(
                _t["shopping.clear_checked"],
                on_click=ShoppingListState.clear_checked,
                variant="soft",
                disabled=ShoppingListState.checked_count == 0,
            ),
            width="100%",
            align="center",
        ),
        rx.cond(
            ShoppingListState.item_count > 0,
            rx.grid(
                rx.foreach(ShoppingListState.categories, category_card),
                columns="2",
                spacing="3",
                width="100%",
            ),
            rx.text(_t["shopping.empty"], color="gray"),
        ),
        title=_t["shopping.title"],
    )
