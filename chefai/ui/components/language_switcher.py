"""Compact language switcher for the sidebar."""

import reflex as rx

from chefai.i18n import REGISTRY
from chefai.ui.state.i18n_state import I18nState


def language_switcher() -> rx.Component:
    return rx.select.root(
        rx.select.trigger(width="100%"),
        rx.select.content(
            *[
                rx.select.item(REGISTRY.display_name(code), value=code)
                for code in REGISTRY.locales
            ],
        ),
        value=I18nState.active_locale,
        on_change=I18nState.switch_locale,
        size="1",
        width="100%",
    )
