"""Admin back-office layout. The back office is English only."""

import reflex as rx

from chefai.ui.components.layout import error_callout
from chefai.ui.state.admin_state import AdminState
from chefai.ui.state.auth_state import AuthState

ADMIN_LINKS = [
    ("Dashboard", "/admin", "layout-dashboard"),
    ("Users", "/admin/users", "users"),
    ("Content", "/admin/content", "message-square"),
    ("Content generator", "/admin/content-generator", "sparkles"),
]


def admin_nav() -> rx.Component:
    return rx.hstack(
        rx.heading("ChefAI Admin", size="5"),
        *[
            rx.link(
                rx.hstack(rx.icon(icon, size=16), rx.text(label, size="2"), align="center"),
                href=path,
                underline="none",
            )
            for label, path, icon in ADMIN_LINKS
        ],
        rx.spacer(),
        rx.text(AuthState.current_user.email, size="2", color="gray"),
        spacing="5",
        align="center",
        padding="16px 24px",
        width="100%",
        border_bottom="1px solid var(--gray-a5)",
    )


def admin_layout(*children, title: str) -> rx.Component:
    return rx.cond(
        AuthState.current_user.is_admin,
        rx.box(
            admin_nav(),
            rx.vstack(
                rx.heading(title, size="6"),
                error_callout(AdminState.error_message),
                *children,
                spacing="4",
                padding="24px",
                width="100%",
            ),
            width="100%",
        ),
        rx.center(rx.spinner(size="3"), height="100vh"),
    )
