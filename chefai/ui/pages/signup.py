"""Signup page."""

import reflex as rx

from chefai.ui.components.layout import locale_href, public_layout
from chefai.ui.state.auth_state import AuthState
from chefai.ui.state.i18n_state import I18nState

_t = I18nState.translations


def _field(label: rx.Var[str], name: str, placeholder: rx.Var[str], **props) -> rx.Component:
    return rx.vstack(
        rx.text(label, size="2", weight="medium"),
        rx.input(placeholder=placeholder, name=name, width="100%", **props),
        spacing="1",
        width="100%",
    )


def signup_page() -> rx.Component:
    return public_layout(
        rx.center(
            rx.vstack(
                rx.heading(_t["auth.create_account"], size="7"),
                rx.text(_t["auth.sign_up_heading"], size="3", color="gray"),
                rx.cond(
                    AuthState.auth_error != "",
                    rx.callout(
                        AuthState.auth_error,
                        icon="triangle_alert",
                        color_scheme="red",
                        width="100%",
                    ),
                ),
                rx.form(
                    rx.vstack(
                        _field(_t["auth.name"], "name", _t["auth.ph_name"]),
                        _field(_t["auth.username"], "username", _t["auth.ph_username"]),
                        _field(_t["auth.email"], "email", _t["auth.ph_email"]),
                        _field(
                            _t["auth.password"],
                            "password",
                            _t["auth.ph_password"],
                            type="password",
                        ),
                        rx.button(
                            _t["auth.sign_up"],
                            type="submit",
                            width="100%",
                            size="3",
                        ),
                        spacing="3",
                        width="100%",
                    ),
                    on_submit=AuthState.signup,
                ),
                rx.text(
                    _t["auth.have_account"],
                    " ",
                    rx.link(
                        _t["auth.sign_in"],
                        href=locale_href("/login"),
                        on_click=AuthState.clear_auth_error,
                    ),
                    size="2",
                    color="gray",
                ),
                spacing="4",
                width="380px",
                padding="32px",
                border="1px solid var(--gray-a5)",
                border_radius="12px",
                bg="var(--color-background)",
            ),
            padding_y="64px",
        ),
    )
