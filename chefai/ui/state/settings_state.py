"""Settings state: profile, visibility, subscription checkout, payouts and account deletion."""

import logging

import reflex as rx
import stripe

from chefai.config import settings
from chefai.i18n.resolver import localize_path
from chefai.services.payment_service import PaymentError, PaymentService
from chefai.services.user_service import UserServiceError
from chefai.ui.state.auth_state import AuthState, UserInfo
from chefai.ui.state.base_state import BaseState, get_sync_session, get_user_service

_log = logging.getLogger(__name__)


def _payment_service() -> PaymentService:
    return PaymentService(
        settings.stripe_secret_key,
        webhook_secret=settings.stripe_webhook_secret,
        tip_amount_cents=settings.tip_amount_cents,
        platform_fee_cents=settings.platform_fee_cents,
    )


class SettingsState(BaseState):
    form_name: str = ""
    form_username: str = ""
    form_bio: str = ""
    form_photo_url: str = ""
    form_profile_type: str = "public"

    profile_saved: bool = False
    checkout_returned: bool = False
    connect_returned: bool = False
    confirm_delete: bool = False

    def set_form_name(self, value: str):
        self.form_name = value

    def set_form_username(self, value: str):
        self.form_username = value

    def set_form_bio(self, value: str):
        self.form_bio = value

    def set_form_photo_url(self, value: str):
        self.form_photo_url = value

    def set_confirm_delete(self, value: bool):
        self.confirm_delete = value

    async def load_settings(self):
        user_id = await self._get_user_id()
        params = self.router.page.params
        self.checkout_returned = bool(params.get("session_id"))
        self.connect_returned = params.get("stripe_connect_return") == "true"
        with get_sync_session() as session:
            user = get_user_service().get_user(session, user_id)
            if user is None:
                return
            self.form_name = user.name
            self.form_username = user.username
            self.form_bio = user.bio or ""
            self.form_photo_url = user.photo_url or ""
            self.form_profile_type = user.profile_type.value
        self.profile_saved = False
        self.confirm_delete = False
        self.error_message = ""
        # Premium flags may have changed through the payment webhook
        return AuthState.refresh_user

    async def save_profile(self):
        user_id = await self._get_user_id()
        try:
            with get_sync_session() as session:
                get_user_service().update_profile(
                    session,
                    user_id,
                    name=self.form_name,
                    username=self.form_username,
                    bio=self.form_bio,
                    photo_url=self.form_photo_url,
                )
                session.commit()
        except UserServiceError as exc:
            self.error_message = str(exc)
            return
        self.error_message = ""
        self.profile_saved = True
        return AuthState.refresh_user

    async def set_profile_type(self, value: str):
        user_id = await self._get_user_id()
        try:
            with get_sync_session() as session:
                get_user_service().update_profile_settings(session, user_id, value)
                session.commit()
        except UserServiceError as exc:
            self.error_message = str(exc)
            return
        self.form_profile_type = value
        return AuthState.refresh_user

    def _origin(self) -> str:
        return self.router.headers.origin or settings.frontend_url

    async def start_checkout(self):
        user_id = await self._get_user_id()
        locale = await self._get_locale()
        try:
            url = _payment_service().create_checkout_session(
                user_id, settings.stripe_pro_price_id, locale, self._origin()
            )
        except PaymentError as exc:
            self.error_message = str(exc)
            return
        except stripe.StripeError as exc:
            _log.exception("Error creating Stripe checkout session")
            self.error_message = str(exc)
            return
        return rx.redirect(url, is_external=True)

    async def start_payout_onboarding(self):
        user_id = await self._get_user_id()
        locale = await self._get_locale()
        try:
            with get_sync_session() as session:
                url = _payment_service().create_connect_onboarding(
                    session, user_id, locale, self._origin()
                )
                session.commit()
        except PaymentError as exc:
            self.error_message = str(exc)
            return
        except stripe.StripeError as exc:
            _log.exception("Error creating Stripe Connect account")
            self.error_message = str(exc)
            return
        return rx.redirect(url, is_external=True)

    async def delete_account(self):
        if not self.confirm_delete:
            return
        user_id = await self._get_user_id()
        locale = await self._get_locale()
        with get_sync_session() as session:
            get_user_service().delete_user(session, user_id)
            session.commit()
        _log.info("User %s deleted their account", user_id)
        auth = await self.get_state(AuthState)
        auth.access_token = ""
        auth.refresh_token = ""
        auth.current_user = UserInfo()
        return rx.redirect(localize_path("/landing", locale))
