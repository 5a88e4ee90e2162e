"""Authentication state: login, signup, logout and the signed-in user."""

import logging

import reflex as rx
from pydantic import BaseModel

from chefai.i18n import REGISTRY
from chefai.i18n.resolver import localize_path
from chefai.models.user import User
from chefai.services.user_service import UserServiceError
from chefai.ui.state.base_state import get_sync_session, get_user_service
from chefai.ui.state.i18n_state import I18nState

_log = logging.getLogger(__name__)


class UserInfo(BaseModel):
    id: int = 0
    email: str = ""
    name: str = ""
    username: str = ""
    photo_url: str = ""
    bio: str = ""
    profile_type: str = "public"
    subscription_tier: str = ""
    is_premium: bool = False
    is_admin: bool = False
    can_monetize: bool = False
    has_payout_account: bool = False


def user_info(user: User, is_admin: bool = False) -> UserInfo:
    return UserInfo(
        id=user.id,
        email=user.email,
        name=user.name,
        username=user.username,
        photo_url=user.photo_url or "",
        bio=user.bio or "",
        profile_type=user.profile_type.value,
        subscription_tier=user.subscription_tier.value if user.subscription_tier else "",
        is_premium=user.is_premium,
        is_admin=is_admin,
        can_monetize=user.can_monetize,
        has_payout_account=bool(user.stripe_connect_account_id),
    )


class AuthState(rx.State):

    access_token: str = ""
    refresh_token: str = ""
    current_user: UserInfo = UserInfo()

    auth_error: str = ""

    def clear_auth_error(self):
        self.auth_error = ""

    @rx.var
    def is_authenticated(self) -> bool:
        return self.access_token != ""

    async def _localized(self, path: str) -> str:
        i18n = await self.get_state(I18nState)
        return localize_path(path, i18n.active_locale)

    async def login(self, form_data: dict):
        self.auth_error = ""
        email = (form_data.get("email") or "").strip()
        password = form_data.get("password") or ""
        if not email or not password:
            self.auth_error = "Email and password are required"
            return

        svc = get_user_service()
        try:
            with get_sync_session() as session:
                result = svc.authenticate(session, email, password)
                if result is not None:
                    info = user_info(result["user"], svc.is_admin(result["user"]))
        except Exception:
            _log.exception("Login failed for %s", email)
            self.auth_error = "Login failed. Please try again."
            return

        if result is None:
            self.auth_error = "Invalid email or password"
            return

        self.access_token = result["access_token"]
        self.refresh_token = result["refresh_token"]
        self.current_user = info
        return rx.redirect(await self._localized("/dashboard"))

    async def signup(self, form_data: dict):
        self.auth_error = ""
        email = (form_data.get("email") or "").strip()
        password = form_data.get("password") or ""
        name = (form_data.get("name") or "").strip()
        username = form_data.get("username") or ""
        if len(password) < 8:
            self.auth_error = "Password must be at least 8 characters"
            return

        svc = get_user_service()
        try:
            with get_sync_session() as session:
                svc.register_user(session, email, password, name, username)
                session.commit()
            with get_sync_session() as session:
                result = svc.authenticate(session, email, password)
                if result is None:
                    self.auth_error = "Signup succeeded but login failed"
                    return
                info = user_info(result["user"], svc.is_admin(result["user"]))
        except UserServiceError as exc:
            self.auth_error = str(exc)
            return
        except Exception:
            _log.exception("Signup failed for %s", email)
            self.auth_error = "Signup failed. Please try again."
            return

        self.access_token = result["access_token"]
        self.refresh_token = result["refresh_token"]
        self.current_user = info
        return rx.redirect(await self._localized("/dashboard"))

    async def logout(self):
        self.access_token = ""
        self.refresh_token = ""
        self.current_user = UserInfo()
        self.auth_error = ""
        return rx.redirect(await self._localized("/login"))

    def refresh_user(self):
        """Reload the signed-in user's profile from the database."""
        if not self.current_user.id:
            return
        svc = get_user_service()
        with get_sync_session() as session:
            user = svc.get_user(session, self.current_user.id)
            if user is None:
                self.access_token = ""
                self.refresh_token = ""
                self.current_user = UserInfo()
                return
            self.current_user = user_info(user, svc.is_admin(user))

    async def check_auth(self):
        if not self.access_token:
            return rx.redirect(await self._localized("/login"))

    def check_admin(self):
        if not self.access_token or not self.current_user.is_admin:
            return rx.redirect(localize_path("/login", REGISTRY.default))
