"""Saved posts page."""

import reflex as rx

from chefai.ui.components.layout import error_callout, page_layout
from chefai.ui.components.post_card import post_list
from chefai.ui.state.community_state import CommunityState
from chefai.ui.state.i18n_state import I18nState

_t = I18nState.translations


def saved_page() -> rx.Component:
    return page_layout(
        error_callout(CommunityState.error_message),
        post_list(_t["saved.empty"]),
        title=_t["saved.title"],
    )
