"""Dismissible intro banner backed by a stored per-user preference."""

import reflex as rx

from chefai.ui.state.banner_state import BannerState
from chefai.ui.state.i18n_state import I18nState

_t = I18nState.translations


def intro_banner(key: str, text: rx.Var[str]) -> rx.Component:
    return rx.cond(
        BannerState.dismissed[key],
        rx.fragment(),
        rx.callout.root(
            rx.hstack(
                rx.callout.icon(rx.icon("info")),
                rx.callout.text(text),
                rx.spacer(),
                rx.button(
                    _t["common.dismiss"],
                    size="1",
                    variant="ghost",
                    on_click=BannerState.dismiss(key),
                ),
                align="center",
                width="100%",
            ),
            width="100%",
        ),
    )
