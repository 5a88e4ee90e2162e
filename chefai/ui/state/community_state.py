"""Community state: feeds, composer, likes, saves, comments, user search and tips."""

import logging

import reflex as rx
import stripe
from pydantic import BaseModel
from sqlalchemy.orm import Session

from chefai.config import settings
from chefai.models.post import Post
from chefai.models.user import User
from chefai.services.community_service import CommunityError, CommunityService
from chefai.services.payment_service import PaymentError, PaymentService
from chefai.services.recipe_schemas import normalize_plan, normalize_recipe
from chefai.ui.state.base_state import BaseState, get_sync_session, get_user_service
from chefai.ui.state.recipes_state import MenuDayItem, RecipeItem, menu_day_item, recipe_item

_log = logging.getLogger(__name__)


class PostItem(BaseModel):
    id: int = 0
    publisher_id: int = 0
    publisher_name: str = ""
    publisher_username: str = ""
    publisher_photo: str = ""
    type: str = "text"
    content: str = ""
    media_url: str = ""
    recipe: RecipeItem = RecipeItem()
    menu_days: list[MenuDayItem] = []
    likes_count: int = 0
    comments_count: int = 0
    liked: bool = False
    saved: bool = False
    is_own: bool = False
    can_tip: bool = False
    created_at: str = ""


class CommentItem(BaseModel):
    id: int = 0
    author_name: str = ""
    author_username: str = ""
    text: str = ""
    created_at: str = ""


class UserCard(BaseModel):
    id: int = 0
    name: str = ""
    username: str = ""
    photo_url: str = ""


def post_items(
    session: Session, svc: CommunityService, posts: list[Post], viewer_id: int
) -> list[PostItem]:
    items = []
    publishers: dict[int, User | None] = {}
    for post in posts:
        if post.publisher_id not in publishers:
            publishers[post.publisher_id] = session.get(User, post.publisher_id)
        publisher = publishers[post.publisher_id]
        items.append(
            PostItem(
                id=post.id,
                publisher_id=post.publisher_id,
                publisher_name=publisher.name if publisher else "",
                publisher_username=publisher.username if publisher else "",
                publisher_photo=(publisher.photo_url or "") if publisher else "",
                type=post.type.value,
                content=post.content,
                media_url=post.media_url or "",
                recipe=recipe_item(normalize_recipe(post.recipe)) if post.recipe else RecipeItem(),
                menu_days=[menu_day_item(day) for day in normalize_plan(post.weekly_meal_plan)],
                likes_count=post.likes_count,
                comments_count=post.comments_count,
                liked=svc.is_liked(session, post.id, viewer_id),
                saved=svc.is_saved(session, viewer_id, post.id),
                is_own=post.publisher_id == viewer_id,
                can_tip=(
                    publisher is not None
                    and bool(publisher.stripe_connect_account_id)
                    and post.publisher_id != viewer_id
                ),
                created_at=post.created_at.strftime("%Y-%m-%d %H:%M") if post.created_at else "",
            )
        )
    return items


class CommunityState(BaseState):
    posts: list[PostItem] = []
    feed_mode: str = "public"
    new_post_content: str = ""

    open_comments_id: int = 0
    comments: list[CommentItem] = []
    comment_input: str = ""

    search_query: str = ""
    search_results: list[UserCard] = []

    tip_success: bool = False

    def set_new_post_content(self, value: str):
        self.new_post_content = value

    def set_comment_input(self, value: str):
        self.comment_input = value

    def set_search_query(self, value: str):
        self.search_query = value

    @rx.var
    def has_posts(self) -> bool:
        return len(self.posts) > 0

    async def load_feed(self):
        self.tip_success = self.router.page.params.get("tip_success") == "true"
        await self._load_feed()

    async def _load_feed(self):
        user_id = await self._get_user_id()
        svc = CommunityService()
        with get_sync_session() as session:
            if self.feed_mode == "following":
                posts = svc.list_following_feed(session, user_id)
            else:
                posts = svc.list_public_feed(session)
            self.posts = post_items(session, svc, posts, user_id)
        self.open_comments_id = 0
        self.error_message = ""

    async def set_feed_mode(self, mode: str):
        self.feed_mode = "following" if mode == "following" else "public"
        await self._load_feed()

    async def load_saved(self):
        user_id = await self._get_user_id()
        svc = CommunityService()
        with get_sync_session() as session:
            self.posts = post_items(session, svc, svc.list_saved_posts(session, user_id), user_id)
        self.feed_mode = "saved"
        self.open_comments_id = 0

    async def load_user_posts(self, profile_user_id: int):
        user_id = await self._get_user_id()
        svc = CommunityService()
        with get_sync_session() as session:
            posts = svc.list_user_posts(session, profile_user_id)
            self.posts = post_items(session, svc, posts, user_id)
        self.feed_mode = "profile"
        self.open_comments_id = 0

    def clear_posts(self):
        self.posts = []

    async def create_post(self):
        user_id = await self._get_user_id()
        try:
            with get_sync_session() as session:
                CommunityService().create_post(session, user_id, self.new_post_content)
                session.commit()
        except CommunityError as exc:
            self.error_message = str(exc)
            return
        self.new_post_content = ""
        await self._load_feed()

    def _replace(self, item: PostItem):
        self.posts = [item if p.id == item.id else p for p in self.posts]

    async def toggle_like(self, post_id: int):
        user_id = await self._get_user_id()
        svc = CommunityService()
        try:
            with get_sync_session() as session:
                svc.toggle_like(session, post_id, user_id)
                session.commit()
                post = svc.get_post(session, post_id)
                self._replace(post_items(session, svc, [post], user_id)[0])
        except CommunityError as exc:
            self.error_message = str(exc)

    async def toggle_save(self, post_id: int):
        user_id = await self._get_user_id()
        svc = CommunityService()
        try:
            with get_sync_session() as session:
                if svc.is_saved(session, user_id, post_id):
                    svc.unsave_post(session, user_id, post_id)
                else:
                    svc.save_post(session, user_id, post_id)
                session.commit()
        except CommunityError as exc:
            self.error_message = str(exc)
            return
        if self.feed_mode == "saved":
            await self.load_saved()
        else:
            self.posts = [
                p.model_copy(update={"saved": not p.saved}) if p.id == post_id else p
                for p in self.posts
            ]

    async def delete_post(self, post_id: int):
        user_id = await self._get_user_id()
        try:
            with get_sync_session() as session:
                CommunityService().delete_post(session, post_id, user_id)
                session.commit()
        except CommunityError as exc:
            self.error_message = str(exc)
            return
        self.posts = [p for p in self.posts if p.id != post_id]

    def toggle_comments(self, post_id: int):
        if self.open_comments_id == post_id:
            self.open_comments_id = 0
            self.comments = []
            return
        self.open_comments_id = post_id
        self.comment_input = ""
        self._load_comments(post_id)

    def _load_comments(self, post_id: int):
        with get_sync_session() as session:
            users: dict[int, User | None] = {}
            comments = []
            for c in CommunityService().list_comments(session, post_id):
                if c.user_id not in users:
                    users[c.user_id] = session.get(User, c.user_id)
                author = users[c.user_id]
                comments.append(
                    CommentItem(
                        id=c.id,
                        author_name=author.name if author else "",
                        author_username=author.username if author else "",
                        text=c.text,
                        created_at=c.created_at.strftime("%Y-%m-%d %H:%M") if c.created_at else "",
                    )
                )
        self.comments = comments

    async def add_comment(self):
        if not self.open_comments_id:
            return
        user_id = await self._get_user_id()
        post_id = self.open_comments_id
        try:
            with get_sync_session() as session:
                CommunityService().add_comment(session, post_id, user_id, self.comment_input)
                session.commit()
        except CommunityError as exc:
            self.error_message = str(exc)
            return
        self.comment_input = ""
        self.error_message = ""
        self._load_comments(post_id)
        self.posts = [
            p.model_copy(update={"comments_count": p.comments_count + 1}) if p.id == post_id else p
            for p in self.posts
        ]

    def search_users(self):
        query = self.search_query.strip()
        if len(query) < 2:
            self.search_results = []
            return
        with get_sync_session() as session:
            self.search_results = [
                UserCard(id=u.id, name=u.name, username=u.username, photo_url=u.photo_url or "")
                for u in get_user_service().search_users(session, query)
            ]

    async def tip_post(self, post_id: int):
        user_id = await self._get_user_id()
        locale = await self._get_locale()
        svc = PaymentService(
            settings.stripe_secret_key,
            tip_amount_cents=settings.tip_amount_cents,
            platform_fee_cents=settings.platform_fee_cents,
        )
        origin = self.router.headers.origin or settings.frontend_url
        try:
            with get_sync_session() as session:
                post = CommunityService().get_post(session, post_id)
                if post is None:
                    self.error_message = "Post not found"
                    return
                url = svc.create_tip_session(
                    session,
                    user_id,
                    post.publisher_id,
                    post.id,
                    post.content,
                    locale,
                    origin,
                )
        except PaymentError as exc:
            self.error_message = str(exc)
            return
        except stripe.StripeError as exc:
            _log.exception("Error creating Stripe tip session")
            self.error_message = str(exc)
            return
        return rx.redirect(url, is_external=True)
