"""Pro subscription page."""

import reflex as rx

from chefai.ui.components.layout import error_callout, page_layout
from chefai.ui.state.auth_state import AuthState
from chefai.ui.state.i18n_state import I18nState
from chefai.ui.state.settings_state import SettingsState

_t = I18nState.translations


def _benefit(text: rx.Var[str]) -> rx.Component:
    return rx.hstack(rx.icon("check", size=16, color="green"), rx.text(text), align="center")


def pro_page() -> rx.Component:
    return page_layout(
        error_callout(SettingsState.error_message),
        rx.card(
            rx.vstack(
                rx.heading(_t["pro.heading"], size="6"),
                rx.text(_t["pro.subtitle"], color="gray"),
                _benefit(_t["pro.benefit_unlimited"]),
                _benefit(_t["pro.benefit_planner"]),
                _benefit(_t["pro.benefit_assistant"]),
                rx.cond(
                    AuthState.current_user.is_premium,
                    rx.badge(_t["settings.premium_active"], size="3"),
                    rx.button(
                        rx.icon("sparkles", size=16),
                        _t["pro.upgrade"],
                        size="3",
                        on_click=SettingsState.start_checkout,
                    ),
                ),
                spacing="3",
            ),
            max_width="520px",
        ),
        title=_t["nav.pro"],
    )
