"""Public profile page."""

import reflex as rx

from chefai.ui.components.layout import error_callout, locale_href, page_layout
from chefai.ui.components.post_card import post_list
from chefai.ui.state.i18n_state import I18nState
from chefai.ui.state.profile_state import ProfileState

_t = I18nState.translations


def _count(value: rx.Var[int], label: rx.Var[str]) -> rx.Component:
    return rx.vstack(
        rx.text(value, weight="bold"),
        rx.text(label, size="1", color="gray"),
        spacing="0",
        align="center",
    )


def _user_links(users) -> rx.Component:
    return rx.flex(
        rx.foreach(
            users,
            lambda u: rx.link(
                rx.badge("@", u.username, variant="soft"),
                href=locale_href(f"/profile/{u.id}"),
            ),
        ),
        wrap="wrap",
        spacing="1",
    )


def profile_header() -> rx.Component:
    return rx.card(
        rx.hstack(
            rx.avatar(src=ProfileState.profile.photo_url, fallback="CA", size="6"),
            rx.vstack(
                rx.hstack(
                    rx.heading(ProfileState.profile.name, size="5"),
                    rx.cond(
                        ProfileState.profile.is_private,
                        rx.badge(rx.icon("lock", size=12), _t["profile.private"]),
                    ),
                    align="center",
                ),
                rx.text("@", ProfileState.profile.username, color="gray"),
                rx.text(ProfileState.profile.bio, size="2"),
                rx.hstack(
                    _count(ProfileState.profile.posts_count, _t["profile.posts"]),
                    _count(ProfileState.profile.followers_count, _t["profile.followers"]),
                    _count(ProfileState.profile.following_count, _t["profile.following"]),
                    spacing="5",
                ),
                spacing="2",
                flex="1",
            ),
            rx.cond(
                ProfileState.is_own,
                rx.link(
                    rx.button(_t["profile.edit"], variant="outline"),
                    href=locale_href("/settings"),
                ),
                rx.button(
                    rx.cond(
                        ProfileState.is_following,
                        _t["profile.unfollow"],
                        _t["profile.follow"],
                    ),
                    on_click=ProfileState.toggle_follow,
                    variant=rx.cond(ProfileState.is_following, "outline", "solid"),
                ),
            ),
            spacing="4",
            align="start",
            width="100%",
        ),
        width="100%",
    )


def profile_page() -> rx.Component:
    return page_layout(
        error_callout(ProfileState.error_message),
        rx.cond(
            ProfileState.not_found,
            rx.text(_t["profile.not_found"], color="gray"),
            rx.vstack(
                profile_header(),
                rx.accordion.root(
                    rx.accordion.item(
                        header=_t["profile.followers"],
                        content=_user_links(ProfileState.followers),
                    ),
                    rx.accordion.item(
                        header=_t["profile.following"],
                        content=_user_links(ProfileState.following),
                    ),
                    collapsible=True,
                    type="multiple",
                    width="100%",
                ),
                rx.cond(
                    ProfileState.can_view_posts,
                    post_list(_t["profile.no_posts"]),
                    rx.callout(
                        _t["profile.private_notice"],
                        icon="lock",
                        width="100%",
                    ),
                ),
                spacing="4",
                width="100%",
            ),
        ),
    )
