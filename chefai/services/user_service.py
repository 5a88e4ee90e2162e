"""User account and profile management service."""

import re

from sqlalchemy import delete, func, or_, select
from sqlalchemy.orm import Session

from chefai.models.post import Comment, Post, PostLike, SavedPost
from chefai.models.preference import UserPreference
from chefai.models.recipe import SavedMenu, SavedRecipe
from chefai.models.shopping_list import ShoppingListItem
from chefai.models.user import Follow, ProfileType, SubscriptionTier, User
from chefai.services.auth import AuthService

_USERNAME_RE = re.compile(r"^[a-z0-9_.]{3,30}$")

PREMIUM_TIERS = {SubscriptionTier.PRO, SubscriptionTier.VOICE_PLUS, SubscriptionTier.LIFETIME}


class UserServiceError(ValueError):
    pass


def validate_username(username: str) -> str:
    """Normalize a username: lowercase, 3-30 of letters, digits, ``_`` or ``.``."""
    username = (username or "").strip().lower()
    if not _USERNAME_RE.match(username):
        raise UserServiceError(
            "Username must be 3-30 characters of letters, numbers, '_' or '.'"
        )
    return username


class UserService:
    def __init__(self, auth_service: AuthService, admin_emails: list[str] | None = None):
        self._auth = auth_service
        self._admin_emails = {e.strip().lower() for e in admin_emails or []}

    # -- Registration & auth --

    def register_user(
        self, session: Session, email: str, password: str, name: str, username: str
    ) -> User:
        if not email or not email.strip():
            raise UserServiceError("Email is required")
        if not password:
            raise UserServiceError("Password is required")
        if not name or not name.strip():
            raise UserServiceError("Name is required")

        email = email.strip().lower()
        username = validate_username(username)

        if self.get_user_by_email(session, email) is not None:
            raise UserServiceError("Email already exists")
        if self.get_user_by_username(session, username) is not None:
            raise UserServiceError("Username already taken")

        user = User(
            email=email,
            password_hash=self._auth.hash_password(password),
            name=name.strip(),
            username=username,
        )
        session.add(user)
        session.flush()
        return user

    def authenticate(self, session: Session, email: str, password: str) -> dict | None:
        user = self.get_user_by_email(session, email)
        if user is None or not user.is_active:
            return None
        if not self._auth.verify_password(password, user.password_hash):
            return None
        return {
            "user": user,
            "access_token": self._auth.create_access_token(user.id),
            "refresh_token": self._auth.create_refresh_token(user.id),
        }

    def get_user_by_email(self, session: Session, email: str) -> User | None:
        email = email.strip().lower()
        stmt = select(User).where(func.lower(User.email) == email)
        return session.execute(stmt).scalar_one_or_none()

    def get_user_by_username(self, session: Session, username: str) -> User | None:
        stmt = select(User).where(User.username == username.strip().lower())
        return session.execute(stmt).scalar_one_or_none()

    def get_user(self, session: Session, user_id: int) -> User | None:
        stmt = select(User).where(User.id == user_id)
        return session.execute(stmt).scalar_one_or_none()

    def list_users(self, session: Session) -> list[User]:
        stmt = select(User).order_by(User.created_at.desc(), User.id.desc())
        return list(session.execute(stmt).scalars().all())

    def search_users(self, session: Session, query: str, limit: int = 20) -> list[User]:
        query = query.strip().lower()
        if not query:
            return []
        pattern = f"%{query}%"
        stmt = (
            select(User)
            .where(or_(User.username.like(pattern), func.lower(User.name).like(pattern)))
            .order_by(User.username)
            .limit(limit)
        )
        return list(session.execute(stmt).scalars().all())

    # -- Profile --

    def update_profile(self, session: Session, user_id: int, **kwargs) -> User | None:
        user = self.get_user(session, user_id)
        if user is None:
            return None

        if "name" in kwargs:
            name = (kwargs["name"] or "").strip()
            if not name:
                raise UserServiceError("Name is required")
            user.name = name
        if "username" in kwargs:
            username = validate_username(kwargs["username"])
            existing = self.get_user_by_username(session, username)
            if existing is not None and existing.id != user.id:
                raise UserServiceError("Username already taken")
            user.username = username
        if "bio" in kwargs:
            user.bio = kwargs["bio"] or None
        if "photo_url" in kwargs:
            user.photo_url = kwargs["photo_url"] or None

        session.flush()
        return user

    def update_profile_settings(
        self, session: Session, user_id: int, profile_type: str
    ) -> User | None:
        try:
            profile_type = ProfileType(profile_type)
        except ValueError:
            raise UserServiceError(f"Invalid profile type: {profile_type}") from None
        user = self.get_user(session, user_id)
        if user is None:
            return None
        user.profile_type = profile_type
        # Existing posts follow the profile's visibility
        posts = session.execute(select(Post).where(Post.publisher_id == user_id)).scalars().all()
        for post in posts:
            post.profile_type = profile_type
        session.flush()
        return user

    # -- Subscriptions & payouts --

    def set_subscription(self, session: Session, user_id: int, tier: str | None) -> User | None:
        user = self.get_user(session, user_id)
        if user is None:
            return None
        if tier:
            try:
                tier = SubscriptionTier(tier)
            except ValueError:
                raise UserServiceError(f"Invalid subscription tier: {tier}") from None
        user.subscription_tier = tier or None
        user.is_premium = tier in PREMIUM_TIERS
        session.flush()
        return user

    def mark_premium(self, session: Session, user_id: int) -> User | None:
        return self.set_subscription(session, user_id, SubscriptionTier.PRO)

    def set_connect_account(self, session: Session, user_id: int, account_id: str) -> User | None:
        user = self.get_user(session, user_id)
        if user is None:
            return None
        user.stripe_connect_account_id = account_id
        session.flush()
        return user

    # -- Admin --

    def is_admin(self, user: User | None) -> bool:
        if user is None:
            return False
        return user.is_admin or user.email.lower() in self._admin_emails

    def delete_user(self, session: Session, user_id: int) -> bool:
        """Delete a user together with everything they own."""
        user = self.get_user(session, user_id)
        if user is None:
            return False

        post_ids = select(Post.id).where(Post.publisher_id == user_id)
        for model in (Comment, PostLike, SavedPost):
            session.execute(delete(model).where(model.post_id.in_(post_ids)))
        session.execute(delete(Post).where(Post.publisher_id == user_id))

        # Their activity on other users' posts
        touched = set(
            session.execute(select(PostLike.post_id).where(PostLike.user_id == user_id)).scalars()
        ) | set(
            session.execute(select(Comment.post_id).where(Comment.user_id == user_id)).scalars()
        )
        session.execute(delete(PostLike).where(PostLike.user_id == user_id))
        session.execute(delete(SavedPost).where(SavedPost.user_id == user_id))
        session.execute(delete(Comment).where(Comment.user_id == user_id))
        for post in session.execute(select(Post).where(Post.id.in_(touched))).scalars().all():
            post.likes_count = session.execute(
                select(func.count()).select_from(PostLike).where(PostLike.post_id == post.id)
            ).scalar_one()
            post.comments_count = session.execute(
                select(func.count()).select_from(Comment).where(Comment.post_id == post.id)
            ).scalar_one()
        session.execute(
            delete(Follow).where(
                or_(Follow.follower_id == user_id, Follow.followed_id == user_id)
            )
        )
        for model in (SavedRecipe, SavedMenu, ShoppingListItem, UserPreference):
            session.execute(delete(model).where(model.user_id == user_id))

        session.delete(user)
        session.flush()
        return True
