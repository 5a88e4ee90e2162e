"""Dashboard page: counters and shortcuts."""

import reflex as rx

from chefai.ui.components.layout import locale_href, page_layout
from chefai.ui.state.auth_state import AuthState
from chefai.ui.state.dashboard_state import DashboardState
from chefai.ui.state.i18n_state import I18nState

_t = I18nState.translations


def stat_card(title: rx.Var[str], value: rx.Var, icon: str, path: str) -> rx.Component:
    return rx.link(
        rx.card(
            rx.vstack(
                rx.icon(icon, size=24),
                rx.text(title, weight="bold"),
                rx.heading(value, size="6"),
                align="center",
                spacing="2",
            ),
            width="200px",
        ),
        href=locale_href(path),
        underline="none",
    )


def dashboard_page() -> rx.Component:
    return page_layout(
        rx.vstack(
            rx.card(
                rx.text(_t["dashboard.welcome"], " ", AuthState.current_user.name, size="4"),
                rx.text(_t["dashboard.welcome_sub"], color="gray"),
                width="100%",
            ),
            rx.hstack(
                stat_card(
                    _t["dashboard.recipes"],
                    DashboardState.stats.total_recipes,
                    "book-open",
                    "/my-recipes",
                ),
                stat_card(
                    _t["dashboard.menus"],
                    DashboardState.stats.total_menus,
                    "notebook-text",
                    "/my-menus",
                ),
                stat_card(
                    _t["dashboard.posts"],
                    DashboardState.stats.total_posts,
                    "message-square",
                    f"/profile/{AuthState.current_user.id}",
                ),
                stat_card(
                    _t["dashboard.shopping_items"],
                    DashboardState.stats.open_shopping_items,
                    "shopping-cart",
                    "/shopping-list",
                ),
                spacing="4",
                wrap="wrap",
            ),
            rx.hstack(
                rx.link(
                    rx.button(rx.icon("chef-hat", size=16), _t["dashboard.new_recipe"]),
                    href=locale_href("/generator"),
                ),
                rx.link(
                    rx.button(
                        rx.icon("calendar-days", size=16),
                        _t["dashboard.new_plan"],
                        variant="outline",
                    ),
                    href=locale_href("/planner"),
                ),
                spacing="3",
            ),
            rx.cond(
                DashboardState.recent_recipes.length() > 0,
                rx.card(
                    rx.vstack(
                        rx.heading(_t["dashboard.recent_recipes"], size="4"),
                        rx.foreach(
                            DashboardState.recent_recipes,
                            lambda name: rx.text(name, size="2"),
                        ),
                        spacing="2",
                    ),
                    width="100%",
                ),
            ),
            spacing="6",
            width="100%",
        ),
        title=_t["nav.dashboard"],
    )
