"""Sidebar navigation and locale-aware page wrappers."""

import reflex as rx

from chefai.ui.components.language_switcher import language_switcher
from chefai.ui.state.auth_state import AuthState
from chefai.ui.state.i18n_state import I18nState

_t = I18nState.translations

# Responsive display values; the third entry applies from the 48em breakpoint
_DESKTOP = ["none", "none", "block"]
_MOBILE = ["flex", "flex", "none"]


def locale_href(path: str) -> str:
    """Link to ``path`` under the active locale prefix."""
    return f"/{I18nState.active_locale}{path}"


def loading_screen() -> rx.Component:
    return rx.center(
        rx.cond(
            I18nState.load_failed,
            rx.callout(
                "Translations could not be loaded. Please reload the page.",
                icon="triangle_alert",
                color_scheme="red",
            ),
            rx.spinner(size="3"),
        ),
        height="100vh",
    )


def when_ready(content: rx.Component) -> rx.Component:
    """Render ``content`` only once the dictionary for the locale has loaded."""
    return rx.cond(I18nState.dictionary_ready, content, loading_screen())


def error_callout(message: rx.Var[str]) -> rx.Component:
    return rx.cond(
        message != "",
        rx.callout(message, icon="triangle_alert", color_scheme="red", width="100%"),
    )


def sidebar_link(text: rx.Var[str], path: str, icon: str) -> rx.Component:
    return rx.link(
        rx.hstack(
            rx.icon(icon, size=18),
            rx.text(text, size="3"),
            spacing="2",
            align="center",
            width="100%",
            padding_x="12px",
            padding_y="8px",
            border_radius="6px",
            _hover={"bg": "var(--gray-a3)"},
        ),
        href=locale_href(path),
        underline="none",
        width="100%",
    )


def sidebar_user_section() -> rx.Component:
    return rx.vstack(
        rx.separator(),
        language_switcher(),
        rx.cond(
            AuthState.current_user.is_premium,
            rx.fragment(),
            sidebar_link(_t["nav.pro"], "/pro", "sparkles"),
        ),
        sidebar_link(_t["nav.settings"], "/settings", "settings"),
        rx.hstack(
            rx.link(
                rx.vstack(
                    rx.text(AuthState.current_user.name, size="2", weight="medium"),
                    rx.text("@", AuthState.current_user.username, size="1", color="gray"),
                    spacing="0",
                ),
                href=locale_href(f"/profile/{AuthState.current_user.id}"),
                underline="none",
            ),
            rx.spacer(),
            rx.icon_button(
                rx.icon("log-out", size=16),
                on_click=AuthState.logout,
                variant="ghost",
                size="1",
            ),
            width="100%",
            padding_x="12px",
            padding_y="8px",
            align="center",
        ),
        spacing="1",
        width="100%",
        padding="8px",
    )


def sidebar() -> rx.Component:
    return rx.box(
        rx.vstack(
            rx.hstack(
                rx.image(src="/logo.png", width="28px", height="28px"),
                rx.heading(_t["app.name"], size="5"),
                spacing="2",
                align="center",
                padding="16px",
            ),
            rx.separator(),
            rx.vstack(
                sidebar_link(_t["nav.dashboard"], "/dashboard", "layout-dashboard"),
                sidebar_link(_t["nav.generator"], "/generator", "chef-hat"),
                sidebar_link(_t["nav.planner"], "/planner", "calendar-days"),
                sidebar_link(_t["nav.my_recipes"], "/my-recipes", "book-open"),
                sidebar_link(_t["nav.my_menus"], "/my-menus", "notebook-text"),
                sidebar_link(_t["nav.shopping_list"], "/shopping-list", "shopping-cart"),
                sidebar_link(_t["nav.community"], "/community", "users"),
                sidebar_link(_t["nav.saved"], "/saved", "bookmark"),
                rx.cond(
                    AuthState.current_user.is_admin,
                    rx.link(
                        rx.hstack(
                            rx.icon("shield", size=18),
                            rx.text(_t["nav.admin"], size="3"),
                            spacing="2",
                            padding_x="12px",
                            padding_y="8px",
                        ),
                        href="/admin",
                        underline="none",
                        width="100%",
                    ),
                ),
                spacing="1",
                width="100%",
                padding="8px",
            ),
            rx.spacer(),
            sidebar_user_section(),
            spacing="0",
            height="100vh",
        ),
        width="240px",
        border_right="1px solid var(--gray-a5)",
        bg="var(--gray-a2)",
        position="fixed",
        left="0",
        top="0",
        display=_DESKTOP,
    )


def mobile_header() -> rx.Component:
    return rx.hstack(
        rx.link(
            rx.hstack(
                rx.image(src="/logo.png", width="28px", height="28px"),
                rx.heading(_t["app.name"], size="5"),
                spacing="2",
                align="center",
            ),
            href=locale_href("/dashboard"),
            underline="none",
        ),
        rx.spacer(),
        rx.box(language_switcher(), width="120px"),
        rx.link(
            rx.icon("settings", size=20),
            href=locale_href("/settings"),
            color="var(--gray-11)",
        ),
        display=_MOBILE,
        position="sticky",
        top="0",
        z_index="30",
        height="64px",
        padding_x="16px",
        spacing="3",
        align="center",
        width="100%",
        bg="var(--color-background)",
        border_bottom="1px solid var(--gray-a5)",
    )


def bottom_nav_link(text: rx.Var[str], path: str, icon: str) -> rx.Component:
    return rx.link(
        rx.vstack(
            rx.icon(icon, size=22),
            rx.text(text, size="1", trim="both"),
            spacing="1",
            align="center",
        ),
        href=locale_href(path),
        underline="none",
        color="var(--gray-11)",
        _hover={"color": "var(--accent-11)"},
    )


def bottom_nav() -> rx.Component:
    return rx.grid(
        bottom_nav_link(_t["nav.dashboard"], "/dashboard", "house"),
        bottom_nav_link(_t["nav.community"], "/community", "users"),
        rx.link(
            rx.center(
                rx.icon("square-plus", size=26),
                width="52px",
                height="52px",
                margin_top="-20px",
                border_radius="50%",
                bg="var(--accent-9)",
                color="white",
                box_shadow="var(--shadow-3)",
            ),
            href=locale_href("/generator"),
            aria_label=_t["nav.generator"],
            justify_self="center",
        ),
        bottom_nav_link(_t["nav.my_recipes"], "/my-recipes", "book-heart"),
        bottom_nav_link(
            _t["nav.profile"], f"/profile/{AuthState.current_user.id}", "circle-user"
        ),
        columns="5",
        align_items="center",
        justify_items="center",
        display=["grid", "grid", "none"],
        position="fixed",
        bottom="0",
        left="0",
        z_index="40",
        width="100%",
        height="64px",
        bg="var(--color-background)",
        border_top="1px solid var(--gray-a5)",
    )


def app_footer() -> rx.Component:
    return rx.center(
        rx.text(_t["footer.rights"], size="1", color="gray"),
        padding="24px",
        margin_top="32px",
        width="100%",
        border_top="1px solid var(--gray-a5)",
    )


def page_layout(*children, title: rx.Var[str] | str = "") -> rx.Component:
    """Signed-in shell: sidebar on wide screens, header and bottom nav below 48em."""
    return when_ready(
        rx.box(
            sidebar(),
            mobile_header(),
            rx.box(
                rx.vstack(
                    rx.cond(title != "", rx.heading(title, size="6"), rx.fragment()),
                    *children,
                    spacing="4",
                    width="100%",
                ),
                app_footer(),
                margin_left=["0", "0", "240px"],
                padding=["16px", "16px", "24px"],
                padding_bottom=["88px", "88px", "24px"],
                width=["100%", "100%", "calc(100% - 240px)"],
            ),
            bottom_nav(),
        )
    )


def public_layout(*children) -> rx.Component:
    """Layout for pages reachable without signing in."""
    return when_ready(
        rx.box(
            rx.hstack(
                rx.link(
                    rx.hstack(
                        rx.image(src="/logo.png", width="32px", height="32px"),
                        rx.heading(_t["app.name"], size="5"),
                        spacing="2",
                        align="center",
                    ),
                    href=locale_href("/landing"),
                    underline="none",
                ),
                rx.spacer(),
                rx.box(language_switcher(), width="140px"),
                padding="16px 24px",
                width="100%",
                align="center",
                border_bottom="1px solid var(--gray-a5)",
            ),
            *children,
            app_footer(),
            width="100%",
        )
    )
