"""Payment routes: Starlette JSON endpoints for Stripe checkout, Connect and webhooks."""

import logging

import stripe
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Route

from chefai.config import settings
from chefai.i18n import REGISTRY
from chefai.models.post import Post
from chefai.models.user import User
from chefai.services.auth import AuthService
from chefai.services.payment_service import PaymentError, PaymentService

_log = logging.getLogger(__name__)


def _get_service() -> PaymentService:
    return PaymentService(
        settings.stripe_secret_key,
        webhook_secret=settings.stripe_webhook_secret,
        tip_amount_cents=settings.tip_amount_cents,
        platform_fee_cents=settings.platform_fee_cents,
    )


def _get_auth() -> AuthService:
    return AuthService(settings.secret_key)


def _get_session():
    from sqlalchemy import create_engine
    from sqlalchemy.orm import Session as SASession

    engine = create_engine(settings.database_url_sync)
    return SASession(engine)


def _error(message: str, status_code: int) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code)


def _origin(request: Request) -> str:
    return request.headers.get("origin") or settings.frontend_url


def _locale(data: dict) -> str:
    locale = data.get("locale")
    return locale if locale in REGISTRY else REGISTRY.default


def _current_user_id(request: Request) -> int | None:
    """User id from a ``Bearer`` access token, or None."""
    header = request.headers.get("authorization", "")
    scheme, _, token = header.partition(" ")
    if scheme.lower() != "bearer" or not token:
        return None
    payload = _get_auth().decode_token(token, expected_type="access")
    return payload.get("user_id") if payload else None


async def _json_body(request: Request) -> dict | None:
    try:
        data = await request.json()
    except ValueError:
        return None
    return data if isinstance(data, dict) else None


async def create_checkout_session(request: Request) -> JSONResponse:
    user_id = _current_user_id(request)
    if user_id is None:
        return _error("Not authenticated", 401)
    data = await _json_body(request)
    if data is None:
        return _error("Invalid JSON body", 400)
    price_id = data.get("price_id") or settings.stripe_pro_price_id
    if not price_id:
        return _error("User or plan not specified", 400)

    with _get_session() as session:
        if session.get(User, user_id) is None:
            return _error("User not found", 404)
    try:
        url = _get_service().create_checkout_session(
            user_id, price_id, _locale(data), _origin(request)
        )
    except PaymentError as exc:
        return _error(str(exc), 400)
    except stripe.StripeError as exc:
        _log.exception("Error creating Stripe checkout session")
        return _error(str(exc), 500)
    return JSONResponse({"url": url})


async def create_connect_account(request: Request) -> JSONResponse:
    user_id = _current_user_id(request)
    if user_id is None:
        return _error("Not authenticated", 401)
    data = await _json_body(request)
    if data is None:
        return _error("Invalid JSON body", 400)

    with _get_session() as session:
        if session.get(User, user_id) is None:
            return _error("User not found", 404)
        try:
            url = _get_service().create_connect_onboarding(
                session, user_id, _locale(data), _origin(request)
            )
            session.commit()
        except PaymentError as exc:
            return _error(str(exc), 400)
        except stripe.StripeError as exc:
            _log.exception("Error creating Stripe Connect account")
            return _error(str(exc), 500)
    return JSONResponse({"url": url})


async def create_tip_session(request: Request) -> JSONResponse:
    tipper_id = _current_user_id(request)
    if tipper_id is None:
        return _error("Not authenticated", 401)
    data = await _json_body(request)
    if data is None:
        return _error("Invalid JSON body", 400)
    post_id = data.get("post_id")
    if not isinstance(post_id, int):
        return _error("Missing data to process tip", 400)

    with _get_session() as session:
        post = session.get(Post, post_id)
        if post is None:
            return _error("Post not found", 404)
        try:
            url = _get_service().create_tip_session(
                session,
                tipper_id,
                post.publisher_id,
                post.id,
                post.content,
                _locale(data),
                _origin(request),
            )
        except PaymentError as exc:
            return _error(str(exc), 400)
        except stripe.StripeError as exc:
            _log.exception("Error creating Stripe tip session")
            return _error(str(exc), 500)
    return JSONResponse({"url": url})


async def stripe_webhook(request: Request) -> JSONResponse:
    payload = await request.body()
    signature = request.headers.get("stripe-signature", "")
    with _get_session() as session:
        try:
            _get_service().handle_webhook(payload, signature, session)
            session.commit()
        except PaymentError as exc:
            return _error(str(exc), 400)
    return JSONResponse({"received": True})


payment_routes = [
    Route("/api/create-checkout-session", create_checkout_session, methods=["POST"]),
    Route("/api/create-connect-account", create_connect_account, methods=["POST"]),
    Route("/api/create-tip-session", create_tip_session, methods=["POST"]),
    Route("/api/stripe-webhook", stripe_webhook, methods=["POST"]),
]
