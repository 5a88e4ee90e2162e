"""Recipe generator page with the cooking assistant chat."""

import reflex as rx

from chefai.ui.components.intro_banner import intro_banner
from chefai.ui.components.layout import error_callout, page_layout
from chefai.ui.components.recipe_card import recipe_card
from chefai.ui.state.generator_state import GeneratorState
from chefai.ui.state.i18n_state import I18nState

_t = I18nState.translations


def generator_form() -> rx.Component:
    return rx.card(
        rx.vstack(
            rx.text(_t["generator.ingredients"], size="2", weight="medium"),
            rx.text_area(
                placeholder=_t["generator.ph_ingredients"],
                value=GeneratorState.form_ingredients,
                on_change=GeneratorState.set_form_ingredients,
                width="100%",
                rows="3",
            ),
            rx.hstack(
                rx.vstack(
                    rx.text(_t["generator.servings"], size="2", weight="medium"),
                    rx.input(
                        type="number",
                        min="1",
                        value=GeneratorState.form_servings,
                        on_change=GeneratorState.set_form_servings,
                    ),
                    spacing="1",
                ),
                rx.vstack(
                    rx.text(_t["generator.cuisine"], size="2", weight="medium"),
                    rx.input(
                        placeholder=_t["generator.ph_cuisine"],
                        value=GeneratorState.form_cuisine,
                        on_change=GeneratorState.set_form_cuisine,
                    ),
                    spacing="1",
                    flex="1",
                ),
                spacing="3",
                width="100%",
            ),
            rx.button(
                rx.cond(
                    GeneratorState.is_generating,
                    rx.spinner(size="2"),
                    rx.icon("sparkles", size=16),
                ),
                _t["generator.generate"],
                on_click=GeneratorState.generate_recipe,
                disabled=GeneratorState.is_generating,
            ),
            spacing="3",
            width="100%",
        ),
        width="100%",
    )


def chat_bubble(message) -> rx.Component:
    return rx.box(
        rx.text(message.content, size="2", white_space="pre-wrap"),
        bg=rx.cond(message.role == "user", "var(--accent-a3)", "var(--gray-a3)"),
        align_self=rx.cond(message.role == "user", "flex-end", "flex-start"),
        padding="8px 12px",
        border_radius="8px",
        max_width="80%",
    )


def assistant_chat() -> rx.Component:
    return rx.card(
        rx.vstack(
            rx.heading(_t["assistant.title"], size="4"),
            rx.text(_t["assistant.hint"], size="2", color="gray"),
            rx.vstack(
                rx.foreach(GeneratorState.chat_history, chat_bubble),
                spacing="2",
                width="100%",
            ),
            rx.form(
                rx.hstack(
                    rx.input(
                        placeholder=_t["assistant.ph_question"],
                        value=GeneratorState.chat_input,
                        on_change=GeneratorState.set_chat_input,
                        width="100%",
                    ),
                    rx.button(
                        rx.cond(GeneratorState.is_answering, rx.spinner(size="2"), rx.fragment()),
                        _t["assistant.ask"],
                        type="submit",
                        disabled=GeneratorState.is_answering,
                    ),
                    width="100%",
                ),
                on_submit=lambda _: GeneratorState.ask_assistant(),
                reset_on_submit=False,
                width="100%",
            ),
            spacing="3",
            width="100%",
        ),
        width="100%",
    )


def generator_page() -> rx.Component:
    return page_layout(
        intro_banner("banner.generator_intro", _t["banner.generator_intro"]),
        error_callout(GeneratorState.error_message),
        generator_form(),
        rx.cond(
            GeneratorState.has_recipe,
            rx.vstack(
                recipe_card(
                    GeneratorState.recipe,
                    rx.button(
                        rx.icon("save", size=16),
                        rx.cond(
                            GeneratorState.recipe_saved,
                            _t["common.saved"],
                            _t["common.save"],
                        ),
                        on_click=GeneratorState.save_recipe,
                        disabled=GeneratorState.recipe_saved,
                    ),
                    rx.button(
                        rx.icon("share-2", size=16),
                        rx.cond(
                            GeneratorState.recipe_published,
                            _t["common.published"],
                            _t["common.publish"],
                        ),
                        on_click=GeneratorState.publish_recipe,
                        disabled=GeneratorState.recipe_published,
                        variant="outline",
                    ),
                    rx.button(
                        _t["common.clear"],
                        on_click=GeneratorState.clear_recipe,
                        variant="ghost",
                    ),
                ),
                assistant_chat(),
                spacing="4",
                width="100%",
            ),
        ),
        title=_t["generator.title"],
    )
