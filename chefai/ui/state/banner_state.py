"""Dismissible intro banners, remembered per user."""

from chefai.services.preferences import BANNER_KEYS, SqlPreferenceBackend, banner_preference
from chefai.ui.state.base_state import BaseState, get_sync_session


class BannerState(BaseState):
    dismissed: dict[str, bool] = {key: False for key in BANNER_KEYS}

    async def load_banners(self):
        user_id = await self._get_user_id()
        if not user_id:
            return
        with get_sync_session() as session:
            backend = SqlPreferenceBackend(session, user_id)
            self.dismissed = {
                key: bool(banner_preference(backend, key).value) for key in BANNER_KEYS
            }

    async def dismiss(self, key: str):
        if key not in BANNER_KEYS:
            return
        self.dismissed = {**self.dismissed, key: True}
        user_id = await self._get_user_id()
        if not user_id:
            return
        with get_sync_session() as session:
            banner_preference(SqlPreferenceBackend(session, user_id), key).set(True)
            session.commit()
