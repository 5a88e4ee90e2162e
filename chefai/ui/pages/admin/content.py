"""Admin content moderation."""

import reflex as rx

from chefai.ui.pages.admin.layout import admin_layout
from chefai.ui.state.admin_state import AdminState


def post_row(post) -> rx.Component:
    return rx.table.row(
        rx.table.cell(post.id),
        rx.table.cell(rx.badge(post.type, variant="soft")),
        rx.table.cell(post.content),
        rx.table.cell(post.likes_count),
        rx.table.cell(post.comments_count),
        rx.table.cell(post.created_at),
        rx.table.cell(
            rx.icon_button(
                rx.icon("trash-2", size=14),
                on_click=AdminState.delete_post(post.id),
                color_scheme="red",
                variant="soft",
                size="1",
            )
        ),
    )


def admin_content_page() -> rx.Component:
    return admin_layout(
        rx.cond(
            AdminState.posts.length() > 0,
            rx.table.root(
                rx.table.header(
                    rx.table.row(
                        rx.table.column_header_cell("ID"),
                        rx.table.column_header_cell("Type"),
                        rx.table.column_header_cell("Content"),
                        rx.table.column_header_cell("Likes"),
                        rx.table.column_header_cell("Comments"),
                        rx.table.column_header_cell("Created"),
                        rx.table.column_header_cell(""),
                    ),
                ),
                rx.table.body(rx.foreach(AdminState.posts, post_row)),
                width="100%",
            ),
            rx.text("No posts yet.", color="gray"),
        ),
        title="Content",
    )
