"""Admin dashboard: platform metrics and the verification queue."""

import reflex as rx

from chefai.ui.pages.admin.layout import admin_layout
from chefai.ui.state.admin_state import AdminState


def metric_card(title: str, value: rx.Var, icon: str) -> rx.Component:
    return rx.card(
        rx.hstack(
            rx.icon(icon, size=28),
            rx.vstack(
                rx.text(title, size="2", color="gray"),
                rx.heading(value, size="6"),
                spacing="1",
            ),
            spacing="3",
            align="center",
        ),
        width="240px",
    )


def admin_dashboard_page() -> rx.Component:
    return admin_layout(
        rx.hstack(
            metric_card("Total revenue", AdminState.metrics.total_revenue, "dollar-sign"),
            metric_card("Users", AdminState.metrics.total_users, "users"),
            metric_card("Published content", AdminState.metrics.total_content, "file-text"),
            spacing="4",
            wrap="wrap",
        ),
        rx.heading("Verification requests", size="4"),
        rx.table.root(
            rx.table.header(
                rx.table.row(
                    rx.table.column_header_cell("User"),
                    rx.table.column_header_cell("Reason"),
                    rx.table.column_header_cell("Status"),
                ),
            ),
            rx.table.body(
                rx.foreach(
                    AdminState.requests,
                    lambda r: rx.table.row(
                        rx.table.cell("@", r.username),
                        rx.table.cell(r.reason),
                        rx.table.cell(rx.badge(r.status, variant="soft")),
                    ),
                ),
            ),
            width="100%",
        ),
        title="Dashboard",
    )
