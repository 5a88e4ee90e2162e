"""Stripe checkout, Connect onboarding, tips and webhook handling."""

import logging

import stripe
from sqlalchemy.orm import Session

from chefai.i18n.resolver import localize_path
from chefai.models.user import User

_log = logging.getLogger(__name__)

TIP_CURRENCY = "usd"
TIP_PRODUCT_IMAGE = "https://placehold.co/128x128/f7a849/333333?text=ChefAI"


class PaymentError(ValueError):
    pass


class PaymentService:
    def __init__(
        self,
        secret_key: str,
        webhook_secret: str = "",
        tip_amount_cents: int = 200,
        platform_fee_cents: int = 50,
    ):
        self.secret_key = secret_key
        self.webhook_secret = webhook_secret
        self.tip_amount_cents = tip_amount_cents
        self.platform_fee_cents = platform_fee_cents

    @staticmethod
    def _url(origin: str, locale: str, path: str) -> str:
        return f"{origin.rstrip('/')}{localize_path(path, locale)}"

    def create_checkout_session(
        self, user_id: int, price_id: str, locale: str, origin: str
    ) -> str:
        """Start a subscription checkout and return the Stripe redirect URL."""
        if not user_id or not price_id:
            raise PaymentError("User or plan not specified")
        checkout = stripe.checkout.Session.create(
            api_key=self.secret_key,
            payment_method_types=["card"],
            line_items=[{"price": price_id, "quantity": 1}],
            mode="subscription",
            success_url=self._url(origin, locale, "/settings")
            + "?session_id={CHECKOUT_SESSION_ID}",
            cancel_url=self._url(origin, locale, "/settings"),
            metadata={"userId": str(user_id), "priceId": price_id},
        )
        if not checkout.url:
            raise PaymentError("Could not create checkout session")
        return checkout.url

    def create_connect_onboarding(
        self, session: Session, user_id: int, locale: str, origin: str
    ) -> str:
        """Create the user's Express account once, then return an onboarding link."""
        user = session.get(User, user_id)
        if user is None:
            raise PaymentError("User not found")

        if not user.stripe_connect_account_id:
            account = stripe.Account.create(
                api_key=self.secret_key,
                type="express",
                email=user.email,
                capabilities={
                    "card_payments": {"requested": True},
                    "transfers": {"requested": True},
                },
            )
            user.stripe_connect_account_id = account.id
            session.flush()
            _log.info("Created Stripe Connect account for user %s", user_id)

        link = stripe.AccountLink.create(
            api_key=self.secret_key,
            account=user.stripe_connect_account_id,
            refresh_url=self._url(origin, locale, "/settings"),
            return_url=self._url(origin, locale, "/settings") + "?stripe_connect_return=true",
            type="account_onboarding",
        )
        return link.url

    def create_tip_session(
        self,
        session: Session,
        tipper_id: int,
        creator_id: int,
        post_id: int,
        post_content: str,
        locale: str,
        origin: str,
    ) -> str:
        """One-off tip to a creator, minus the platform fee."""
        if not tipper_id or not creator_id or not post_id:
            raise PaymentError("Missing data to process tip")
        creator = session.get(User, creator_id)
        if creator is None or not creator.stripe_connect_account_id:
            raise PaymentError("Creator account not set up for payments")

        community = self._url(origin, locale, "/community")
        checkout = stripe.checkout.Session.create(
            api_key=self.secret_key,
            payment_method_types=["card"],
            line_items=[
                {
                    "price_data": {
                        "currency": TIP_CURRENCY,
                        "product_data": {
                            "name": f'Tip for post: "{(post_content or "")[:50]}..."',
                            "images": [TIP_PRODUCT_IMAGE],
                        },
                        "unit_amount": self.tip_amount_cents,
                    },
                    "quantity": 1,
                }
            ],
            mode="payment",
            payment_intent_data={
                "application_fee_amount": self.platform_fee_cents,
                "transfer_data": {"destination": creator.stripe_connect_account_id},
            },
            success_url=f"{community}?tip_success=true&post={post_id}",
            cancel_url=community,
            metadata={
                "tipperId": str(tipper_id),
                "creatorId": str(creator_id),
                "postId": str(post_id),
            },
        )
        if not checkout.url:
            raise PaymentError("Could not create checkout session")
        return checkout.url

    def handle_webhook(self, payload: bytes, signature: str, session: Session) -> str:
        """Verify and apply a Stripe event; returns the event type.

        Raises ``PaymentError`` for a bad signature or missing metadata.
        """
        try:
            event = stripe.Webhook.construct_event(payload, signature, self.webhook_secret)
        except (ValueError, stripe.SignatureVerificationError) as exc:
            _log.warning("Rejected Stripe webhook: %s", exc)
            raise PaymentError(f"Webhook Error: {exc}") from exc

        if event["type"] == "checkout.session.completed":
            metadata = event["data"]["object"].get("metadata") or {}
            user_id = metadata.get("userId")
            if not user_id:
                _log.warning("checkout.session.completed without userId metadata")
                raise PaymentError("Webhook Error: missing user metadata")
            user = session.get(User, int(user_id)) if str(user_id).isdigit() else None
            if user is None:
                raise PaymentError(f"Webhook Error: user {user_id} not found")
            user.is_premium = True
            session.flush()
            _log.info("User %s upgraded to premium", user_id)
        return event["type"]
