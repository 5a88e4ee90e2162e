"""Tests for Stripe checkout, Connect onboarding, tips and webhooks."""

from unittest.mock import MagicMock, patch

import pytest
import stripe

from chefai.services.payment_service import PaymentError, PaymentService

ORIGIN = "https://chefai.test"


@pytest.fixture
def svc():
    return PaymentService(
        "sk_test", webhook_secret="whsec_test", tip_amount_cents=300, platform_fee_cents=75
    )


def _event(event_type, metadata=None):
    return {"type": event_type, "data": {"object": {"metadata": metadata}}}


class TestCheckout:
    def test_returns_url_and_localized_redirects(self, svc):
        with patch("stripe.checkout.Session.create") as create:
            create.return_value = MagicMock(url="https://stripe.test/c/1")
            url = svc.create_checkout_session(7, "price_pro", "fr", ORIGIN)

        assert url == "https://stripe.test/c/1"
        kwargs = create.call_args.kwargs
        assert kwargs["mode"] == "subscription"
        assert kwargs["api_key"] == "sk_test"
        assert kwargs["line_items"] == [{"price": "price_pro", "quantity": 1}]
        assert kwargs["success_url"].startswith(f"{ORIGIN}/fr/settings?session_id=")
        assert kwargs["cancel_url"] == f"{ORIGIN}/fr/settings"
        assert kwargs["metadata"] == {"userId": "7", "priceId": "price_pro"}

    def test_missing_plan(self, svc):
        with pytest.raises(PaymentError, match="User or plan not specified"):
            svc.create_checkout_session(7, "", "es", ORIGIN)

    def test_no_url(self, svc):
        with patch("stripe.checkout.Session.create") as create:
            create.return_value = MagicMock(url=None)
            with pytest.raises(PaymentError, match="Could not create checkout session"):
                svc.create_checkout_session(7, "price_pro", "es", ORIGIN)


class TestConnect:
    def test_creates_account_once(self, svc, db_session, make_user):
        user = make_user()
        with (
            patch("stripe.Account.create") as account_create,
            patch("stripe.AccountLink.create") as link_create,
        ):
            account_create.return_value = MagicMock(id="acct_1")
            link_create.return_value = MagicMock(url="https://stripe.test/onboard")

            url = svc.create_connect_onboarding(db_session, user.id, "en", ORIGIN)
            svc.create_connect_onboarding(db_session, user.id, "en", ORIGIN)

        assert url == "https://stripe.test/onboard"
        assert user.stripe_connect_account_id == "acct_1"
        account_create.assert_called_once()
        assert account_create.call_args.kwargs["type"] == "express"
        link_kwargs = link_create.call_args.kwargs
        assert link_kwargs["account"] == "acct_1"
        assert link_kwargs["return_url"] == f"{ORIGIN}/en/settings?stripe_connect_return=true"

    def test_unknown_user(self, svc, db_session):
        with pytest.raises(PaymentError, match="User not found"):
            svc.create_connect_onboarding(db_session, 99999, "en", ORIGIN)


class TestTip:
    def test_tip_session(self, svc, db_session, make_user):
        tipper = make_user()
        creator = make_user(stripe_connect_account_id="acct_creator")
        with patch("stripe.checkout.Session.create") as create:
            create.return_value = MagicMock(url="https://stripe.test/tip")
            url = svc.create_tip_session(
                db_session, tipper.id, creator.id, 5, "A long post " * 10, "it", ORIGIN
            )

        assert url == "https://stripe.test/tip"
        kwargs = create.call_args.kwargs
        assert kwargs["mode"] == "payment"
        assert kwargs["line_items"][0]["price_data"]["unit_amount"] == 300
        assert kwargs["payment_intent_data"] == {
            "application_fee_amount": 75,
            "transfer_data": {"destination": "acct_creator"},
        }
        assert kwargs["success_url"] == f"{ORIGIN}/it/community?tip_success=true&post=5"
        assert kwargs["cancel_url"] == f"{ORIGIN}/it/community"

    def test_creator_without_account(self, svc, db_session, make_user):
        tipper, creator = make_user(), make_user()
        with pytest.raises(PaymentError, match="not set up for payments"):
            svc.create_tip_session(db_session, tipper.id, creator.id, 5, "post", "es", ORIGIN)

    def test_missing_data(self, svc, db_session):
        with pytest.raises(PaymentError, match="Missing data"):
            svc.create_tip_session(db_session, 1, 2, 0, "post", "es", ORIGIN)


class TestWebhook:
    def test_checkout_completed_marks_premium(self, svc, db_session, make_user):
        user = make_user()
        with patch("stripe.Webhook.construct_event") as construct:
            construct.return_value = _event(
                "checkout.session.completed", {"userId": str(user.id)}
            )
            assert svc.handle_webhook(b"{}", "sig", db_session) == "checkout.session.completed"
        construct.assert_called_once_with(b"{}", "sig", "whsec_test")
        assert user.is_premium is True

    def test_other_events_ignored(self, svc, db_session):
        with patch("stripe.Webhook.construct_event") as construct:
            construct.return_value = _event("invoice.paid")
            assert svc.handle_webhook(b"{}", "sig", db_session) == "invoice.paid"

    def test_bad_signature(self, svc, db_session):
        with patch("stripe.Webhook.construct_event") as construct:
            construct.side_effect = stripe.SignatureVerificationError("bad", "sig")
            with pytest.raises(PaymentError, match="Webhook Error"):
                svc.handle_webhook(b"{}", "sig", db_session)

    def test_missing_metadata(self, svc, db_session):
        with patch("stripe.Webhook.construct_event") as construct:
            construct.return_value = _event("checkout.session.completed", None)
            with pytest.raises(PaymentError, match="missing user metadata"):
                svc.handle_webhook(b"{}", "sig", db_session)

    def test_unknown_user(self, svc, db_session):
        with patch("stripe.Webhook.construct_event") as construct:
            construct.return_value = _event("checkout.session.completed", {"userId": "99999"})
            with pytest.raises(PaymentError, match="not found"):
                svc.handle_webhook(b"{}", "sig", db_session)
