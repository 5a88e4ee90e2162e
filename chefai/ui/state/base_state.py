"""Base state with the signed-in user id, the active locale and a sync session helper."""

import reflex as rx
from sqlalchemy import create_engine
from sqlalchemy.orm import Session

from chefai.config import settings
from chefai.i18n import REGISTRY
from chefai.services.auth import AuthService
from chefai.services.user_service import UserService

_engine = create_engine(settings.database_url_sync)


def get_sync_session() -> Session:
    """Create a sync session for use in Reflex event handlers."""
    return Session(_engine)


def get_user_service() -> UserService:
    auth = AuthService(
        settings.secret_key,
        access_expire_minutes=settings.access_token_expire_minutes,
        refresh_expire_days=settings.refresh_token_expire_days,
    )
    return UserService(auth, admin_emails=settings.admin_emails)


class BaseState(rx.State):
    """Base state with the current user and locale available to all substates."""

    error_message: str = ""

    async def _get_user_id(self) -> int:
        from chefai.ui.state.auth_state import AuthState

        auth = await self.get_state(AuthState)
        return auth.current_user.id

    async def _get_locale(self) -> str:
        from chefai.ui.state.i18n_state import I18nState

        i18n = await self.get_state(I18nState)
        return i18n.active_locale

    async def _get_ai_language(self) -> str:
        return REGISTRY.ai_language(await self._get_locale())


def parse_int(value: str, default: int) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default
