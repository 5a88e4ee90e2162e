"""Login page."""

import reflex as rx

from chefai.ui.components.layout import locale_href, public_layout
from chefai.ui.state.auth_state import AuthState
from chefai.ui.state.i18n_state import I18nState

_t = I18nState.translations


def login_page() -> rx.Component:
    return public_layout(
        rx.center(
            rx.vstack(
                rx.hstack(
                    rx.image(src="/logo.png", width="48px", height="48px"),
                    rx.heading(_t["app.name"], size="7"),
                    spacing="3",
                    align="center",
                ),
                rx.text(_t["auth.sign_in_heading"], size="3", color="gray"),
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
                        rx.text(_t["auth.email"], size="2", weight="medium"),
                        rx.input(
                            placeholder=_t["auth.ph_email"],
                            name="email",
                            width="100%",
                        ),
                        rx.text(_t["auth.password"], size="2", weight="medium"),
                        rx.input(
                            placeholder=_t["auth.ph_password"],
                            name="password",
                            type="password",
                            width="100%",
                        ),
                        rx.button(
                            _t["auth.sign_in"],
                            type="submit",
                            width="100%",
                            size="3",
                        ),
                        spacing="3",
                        width="100%",
                    ),
                    on_submit=AuthState.login,
                ),
                rx.text(
                    _t["auth.no_account"],
                    " ",
                    rx.link(
                        _t["auth.sign_up"],
                        href=locale_href("/signup"),
                        on_click=AuthState.clear_auth_error,
                    ),
                    size="2",
                    color="gray",
                ),
                spacing="4",
                width="360px",
                padding="32px",
                border="1px solid var(--gray-a5)",
                border_radius="12px",
                bg="var(--color-background)",
            ),
            padding_y="64px",
        ),
    )
