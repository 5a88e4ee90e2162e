"""Community post card with likes, saves, comments and tips."""

import reflex as rx

from chefai.ui.components.layout import locale_href
from chefai.ui.components.recipe_card import meal_plan, recipe_details
from chefai.ui.state.community_state import CommunityState
from chefai.ui.state.i18n_state import I18nState

_t = I18nState.translations


def _comments(post) -> rx.Component:
    return rx.cond(
        CommunityState.open_comments_id == post.id,
        rx.vstack(
            rx.separator(),
            rx.foreach(
                CommunityState.comments,
                lambda c: rx.vstack(
                    rx.hstack(
                        rx.text(c.author_name, weight="medium", size="2"),
                        rx.text("@", c.author_username, size="1", color="gray"),
                        rx.spacer(),
                        rx.text(c.created_at, size="1", color="gray"),
                        width="100%",
                    ),
                    rx.text(c.text, size="2"),
                    spacing="0",
                    width="100%",
                ),
            ),
            rx.hstack(
                rx.input(
                    placeholder=_t["community.ph_comment"],
                    value=CommunityState.comment_input,
                    on_change=CommunityState.set_comment_input,
                    width="100%",
                ),
                rx.button(_t["community.comment"], on_click=CommunityState.add_comment),
                width="100%",
            ),
            spacing="2",
            width="100%",
        ),
    )


def post_card(post) -> rx.Component:
    return rx.card(
        rx.vstack(
            rx.hstack(
                rx.avatar(src=post.publisher_photo, fallback="CA", size="2"),
                rx.link(
                    rx.vstack(
                        rx.text(post.publisher_name, weight="medium", size="2"),
                        rx.text("@", post.publisher_username, size="1", color="gray"),
                        spacing="0",
                    ),
                    href=locale_href(f"/profile/{post.publisher_id}"),
                    underline="none",
                ),
                rx.spacer(),
                rx.text(post.created_at, size="1", color="gray"),
                align="center",
                width="100%",
            ),
            rx.cond(post.content != "", rx.text(post.content, white_space="pre-wrap")),
            rx.cond(
                post.media_url != "",
                rx.image(src=post.media_url, width="100%", border_radius="8px"),
            ),
            rx.match(
                post.type,
                (
                    "recipe",
                    rx.accordion.root(
                        rx.accordion.item(
                            header=rx.text(post.recipe.name, weight="bold"),
                            content=recipe_details(post.recipe),
                        ),
                        collapsible=True,
                        width="100%",
                    ),
                ),
                (
                    "menu",
                    rx.accordion.root(
                        rx.accordion.item(
                            header=rx.text(_t["community.weekly_menu"], weight="bold"),
                            content=meal_plan(post.menu_days),
                        ),
                        collapsible=True,
                        width="100%",
                    ),
                ),
                rx.fragment(),
            ),
            rx.hstack(
                rx.button(
                    rx.icon("heart", size=16),
                    post.likes_count,
                    variant=rx.cond(post.liked, "solid", "soft"),
                    color_scheme="red",
                    size="1",
                    on_click=CommunityState.toggle_like(post.id),
                ),
                rx.button(
                    rx.icon("message-circle", size=16),
                    post.comments_count,
                    variant="soft",
                    size="1",
                    on_click=CommunityState.toggle_comments(post.id),
                ),
                rx.button(
                    rx.icon("bookmark", size=16),
                    rx.cond(post.saved, _t["community.unsave"], _t["community.save"]),
                    variant=rx.cond(post.saved, "solid", "soft"),
                    size="1",
                    on_click=CommunityState.toggle_save(post.id),
                ),
                rx.cond(
                    post.can_tip,
                    rx.button(
                        rx.icon("coins", size=16),
                        _t["community.tip"],
                        variant="soft",
                        color_scheme="amber",
                        size="1",
                        on_click=CommunityState.tip_post(post.id),
                    ),
                ),
                rx.spacer(),
                rx.cond(
                    post.is_own,
                    rx.button(
                        _t["common.delete"],
                        size="1",
                        color_scheme="red",
                        variant="outline",
                        on_click=CommunityState.delete_post(post.id),
                    ),
                ),
                width="100%",
                align="center",
            ),
            _comments(post),
            spacing="3",
            width="100%",
        ),
        width="100%",
    )


def post_list(empty_text: rx.Var[str]) -> rx.Component:
    return rx.cond(
        CommunityState.has_posts,
        rx.vstack(rx.foreach(CommunityState.posts, post_card), spacing="3", width="100%"),
        rx.text(empty_text, color="gray"),
    )
