"""Account settings page."""

import reflex as rx

from chefai.ui.components.layout import error_callout, page_layout
from chefai.ui.state.auth_state import AuthState
from chefai.ui.state.i18n_state import I18nState
from chefai.ui.state.settings_state import SettingsState

_t = I18nState.translations


def _success(message: rx.Var[str]) -> rx.Component:
    return rx.callout(message, icon="circle_check", color_scheme="green", width="100%")


def _field(label: rx.Var[str], value, on_change) -> rx.Component:
    return rx.vstack(
        rx.text(label, size="2", weight="medium"),
        rx.input(value=value, on_change=on_change, width="100%"),
        spacing="1",
        width="100%",
    )


def profile_section() -> rx.Component:
    return rx.card(
        rx.vstack(
            rx.heading(_t["settings.profile"], size="4"),
            _field(_t["auth.name"], SettingsState.form_name, SettingsState.set_form_name),
            _field(
                _t["auth.username"],
                SettingsState.form_username,
                SettingsState.set_form_username,
            ),
            rx.vstack(
                rx.text(_t["settings.bio"], size="2", weight="medium"),
                rx.text_area(
                    value=SettingsState.form_bio,
                    on_change=SettingsState.set_form_bio,
                    width="100%",
                ),
                spacing="1",
                width="100%",
            ),
            _field(
                _t["settings.photo_url"],
                SettingsState.form_photo_url,
                SettingsState.set_form_photo_url,
            ),
            rx.hstack(
                rx.button(_t["common.save"], on_click=SettingsState.save_profile),
                rx.cond(
                    SettingsState.profile_saved,
                    rx.text(_t["common.saved"], size="2", color="green"),
                ),
                align="center",
            ),
            spacing="3",
            width="100%",
        ),
        width="100%",
    )


def visibility_section() -> rx.Component:
    return rx.card(
        rx.vstack(
            rx.heading(_t["settings.visibility"], size="4"),
            rx.text(_t["settings.visibility_hint"], size="2", color="gray"),
            rx.radio_group.root(
                rx.vstack(
                    rx.radio_group.item(_t["settings.public"], value="public"),
                    rx.radio_group.item(_t["settings.private"], value="private"),
                    spacing="2",
                ),
                value=SettingsState.form_profile_type,
                on_change=SettingsState.set_profile_type,
            ),
            spacing="3",
            width="100%",
        ),
        width="100%",
    )


def billing_section() -> rx.Component:
    return rx.card(
        rx.vstack(
            rx.heading(_t["settings.billing"], size="4"),
            rx.cond(
                SettingsState.checkout_returned,
                _success(_t["settings.checkout_success"]),
            ),
            rx.cond(
                AuthState.current_user.is_premium,
                rx.badge(rx.icon("sparkles", size=12), _t["settings.premium_active"]),
                rx.button(
                    rx.icon("sparkles", size=16),
                    _t["pro.upgrade"],
                    on_click=SettingsState.start_checkout,
                ),
            ),
            rx.separator(),
            rx.heading(_t["settings.payouts"], size="3"),
            rx.cond(
                SettingsState.connect_returned,
                _success(_t["settings.connect_success"]),
            ),
            rx.text(_t["settings.payouts_hint"], size="2", color="gray"),
            rx.button(
                rx.icon("wallet", size=16),
                rx.cond(
                    AuthState.current_user.has_payout_account,
                    _t["settings.payouts_manage"],
                    _t["settings.payouts_connect"],
                ),
                on_click=SettingsState.start_payout_onboarding,
                variant="outline",
            ),
            spacing="3",
            width="100%",
        ),
        width="100%",
    )


def danger_section() -> rx.Component:
    return rx.card(
        rx.vstack(
            rx.heading(_t["settings.delete_account"], size="4", color="red"),
            rx.text(_t["settings.delete_warning"], size="2", color="gray"),
            rx.checkbox(
                _t["settings.delete_confirm"],
                checked=SettingsState.confirm_delete,
                on_change=SettingsState.set_confirm_delete,
            ),
            rx.button(
                _t["settings.delete_account"],
                color_scheme="red",
                on_click=SettingsState.delete_account,
                disabled=~SettingsState.confirm_delete,
            ),
            spacing="3",
            width="100%",
        ),
        width="100%",
    )


def settings_page() -> rx.Component:
    return page_layout(
        error_callout(SettingsState.error_message),
        profile_section(),
        visibility_section(),
        billing_section(),
        danger_section(),
        title=_t["nav.settings"],
    )
