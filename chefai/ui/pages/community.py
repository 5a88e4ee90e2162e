"""Community page: feeds, composer and user search."""

import reflex as rx

from chefai.ui.components.intro_banner import intro_banner
from chefai.ui.components.layout import error_callout, locale_href, page_layout
from chefai.ui.components.post_card import post_list
from chefai.ui.state.community_state import CommunityState
from chefai.ui.state.i18n_state import I18nState

_t = I18nState.translations


def composer() -> rx.Component:
    return rx.card(
        rx.vstack(
            rx.text_area(
                placeholder=_t["community.ph_post"],
                value=CommunityState.new_post_content,
                on_change=CommunityState.set_new_post_content,
                width="100%",
                rows="3",
            ),
            rx.hstack(
                rx.spacer(),
                rx.button(
                    rx.icon("send", size=16),
                    _t["community.post"],
                    on_click=CommunityState.create_post,
                    disabled=CommunityState.new_post_content.strip() == "",
                ),
                width="100%",
            ),
            spacing="2",
            width="100%",
        ),
        width="100%",
    )


def user_search() -> rx.Component:
    return rx.card(
        rx.vstack(
            rx.heading(_t["community.find_people"], size="3"),
            rx.hstack(
                rx.input(
                    placeholder=_t["community.ph_search"],
                    value=CommunityState.search_query,
                    on_change=CommunityState.set_search_query,
                    width="100%",
                ),
                rx.icon_button(rx.icon("search", size=16), on_click=CommunityState.search_users),
                width="100%",
            ),
            rx.foreach(
                CommunityState.search_results,
                lambda u: rx.link(
                    rx.hstack(
                        rx.avatar(src=u.photo_url, fallback="CA", size="1"),
                        rx.text(u.name, size="2"),
                        rx.text("@", u.username, size="1", color="gray"),
                        align="center",
                    ),
                    href=locale_href(f"/profile/{u.id}"),
                    underline="none",
                ),
            ),
            spacing="2",
            width="100%",
        ),
        width="280px",
    )


def community_page() -> rx.Component:
    return page_layout(
        intro_banner("banner.community_intro", _t["banner.community_intro"]),
        error_callout(CommunityState.error_message),
        rx.cond(
            CommunityState.tip_success,
            rx.callout(
                _t["community.tip_success"],
                icon="circle_check",
                color_scheme="green",
                width="100%",
            ),
        ),
        rx.hstack(
            rx.vstack(
                rx.tabs.root(
                    rx.tabs.list(
                        rx.tabs.trigger(_t["community.feed_public"], value="public"),
                        rx.tabs.trigger(_t["community.feed_following"], value="following"),
                    ),
                    value=CommunityState.feed_mode,
                    on_change=CommunityState.set_feed_mode,
                ),
                composer(),
                post_list(_t["community.empty"]),
                spacing="3",
                flex="1",
            ),
            user_search(),
            spacing="4",
            align="start",
            width="100%",
        ),
        title=_t["community.title"],
    )
