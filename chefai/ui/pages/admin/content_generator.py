"""Generate a recipe post for the official account from a topic."""

import reflex as rx

from chefai.ui.pages.admin.layout import admin_layout
from chefai.ui.state.admin_state import AdminState


def admin_content_generator_page() -> rx.Component:
    return admin_layout(
        rx.card(
            rx.vstack(
                rx.text(
                    "Describe a topic and a recipe will be generated and published "
                    "from the official account.",
                    size="2",
                    color="gray",
                ),
                rx.input(
                    placeholder="e.g. Quick vegan dinners for autumn",
                    value=AdminState.topic,
                    on_change=AdminState.set_topic,
                    width="100%",
                ),
                rx.button(
                    rx.cond(
                        AdminState.is_generating,
                        rx.spinner(size="2"),
                        rx.icon("sparkles", size=16),
                    ),
                    "Generate and publish",
                    on_click=AdminState.generate_post,
                    disabled=AdminState.is_generating,
                ),
                rx.cond(
                    AdminState.generated_post_id > 0,
                    rx.callout(
                        rx.text("Published post #", AdminState.generated_post_id),
                        icon="circle_check",
                        color_scheme="green",
                        width="100%",
                    ),
                ),
                spacing="3",
                width="100%",
            ),
            max_width="640px",
        ),
        title="Content generator",
    )
