"""Admin user management."""

import reflex as rx

from chefai.ui.pages.admin.layout import admin_layout
from chefai.ui.state.admin_state import TIER_OPTIONS, AdminState


def user_row(user) -> rx.Component:
    return rx.table.row(
        rx.table.cell(user.name),
        rx.table.cell("@", user.username),
        rx.table.cell(user.email),
        rx.table.cell(
            rx.select(
                TIER_OPTIONS,
                value=user.tier,
                on_change=lambda tier: AdminState.set_tier(user.id, tier),
                size="1",
            )
        ),
        rx.table.cell(
            rx.cond(user.is_premium, rx.badge("premium", color_scheme="green"), rx.text("-"))
        ),
        rx.table.cell(user.created_at),
        rx.table.cell(
            rx.icon_button(
                rx.icon("trash-2", size=14),
                on_click=AdminState.delete_user(user.id),
                color_scheme="red",
                variant="soft",
                size="1",
            )
        ),
    )


def admin_users_page() -> rx.Component:
    return admin_layout(
        rx.table.root(
            rx.table.header(
                rx.table.row(
                    rx.table.column_header_cell("Name"),
                    rx.table.column_header_cell("Username"),
                    rx.table.column_header_cell("Email"),
                    rx.table.column_header_cell("Subscription"),
                    rx.table.column_header_cell("Premium"),
                    rx.table.column_header_cell("Joined"),
                    rx.table.column_header_cell(""),
                ),
            ),
            rx.table.body(rx.foreach(AdminState.users, user_row)),
            width="100%",
        ),
        title="Users",
    )
