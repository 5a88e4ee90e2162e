"""Landing page."""

import reflex as rx

from chefai.ui.components.layout import locale_href, public_layout
from chefai.ui.state.i18n_state import I18nState

_t = I18nState.translations


def feature_card(icon: str, title: rx.Var[str], text: rx.Var[str]) -> rx.Component:
    return rx.card(
        rx.vstack(
            rx.icon(icon, size=28),
            rx.heading(title, size="4"),
            rx.text(text, color="gray", size="2"),
            spacing="2",
        ),
        width="260px",
    )


def landing_page() -> rx.Component:
    return public_layout(
        rx.center(
            rx.vstack(
                rx.heading(_t["landing.title"], size="9", text_align="center"),
                rx.text(_t["landing.subtitle"], size="5", color="gray", text_align="center"),
                rx.hstack(
                    rx.link(
                        rx.button(_t["landing.cta_start"], size="4"),
                        href=locale_href("/signup"),
                    ),
                    rx.link(
                        rx.button(_t["landing.cta_login"], size="4", variant="outline"),
                        href=locale_href("/login"),
                    ),
                    spacing="3",
                ),
                rx.hstack(
                    feature_card(
                        "chef-hat",
                        _t["landing.feature_generator_title"],
                        _t["landing.feature_generator_text"],
                    ),
                    feature_card(
                        "calendar-days",
                        _t["landing.feature_planner_title"],
                        _t["landing.feature_planner_text"],
                    ),
                    feature_card(
                        "shopping-cart",
                        _t["landing.feature_shopping_title"],
                        _t["landing.feature_shopping_text"],
                    ),
                    feature_card(
                        "users",
                        _t["landing.feature_community_title"],
                        _t["landing.feature_community_text"],
                    ),
                    spacing="4",
                    wrap="wrap",
                    justify="center",
                    padding_top="32px",
                ),
                spacing="5",
                align="center",
                max_width="1100px",
            ),
            padding="64px 24px",
        ),
    )
