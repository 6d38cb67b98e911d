"""
apps.stripe_demo.services
~~~~~~~~~~~~~~~~~~~~~~~~~
All business logic for the stripe-demo plugin.

Views must call only these functions.

Responsibilities
----------------
- Reading and writing the Stripe secret key in the plugin store.
- Creating payment intents with the stored key.
"""
from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

import stripe
import structlog
from django.conf import settings

from apps.core_store.store import PluginStore
from common.exceptions import BadGatewayError, ServiceUnavailableError

from .constants import CONFIG_STORE_KEY, PLUGIN_ID
from .redaction import mask_secret

logger = structlog.get_logger(__name__)


def _store() -> PluginStore:
    return PluginStore(name=PLUGIN_ID)


# ---------------------------------------------------------------------------
# Stripe key
# ---------------------------------------------------------------------------

def get_stripe_key() -> str | None:
    """
    Return the stored Stripe secret key.

    Returns:
        The key, or ``None`` when it was never configured or is empty.
    """
    config = _store().get(CONFIG_STORE_KEY) or {}
    return config.get("stripeKey") or None


def save_stripe_key(stripe_key: str) -> None:
    """
    Persist *stripe_key*, overwriting any previous value.

    Args:
        stripe_key: The secret key.  Format is not checked here; the admin
            page and the configuration panel validate before calling.
    """
    _store().set(CONFIG_STORE_KEY, {"stripeKey": stripe_key})
    logger.info("stripe_key_saved", stripe_key=mask_secret(stripe_key))


# ---------------------------------------------------------------------------
# Payments
# ---------------------------------------------------------------------------

def to_cents(amount: Decimal) -> int:
    """Convert a dollar amount to integer cents, rounding half up."""
    return int((Decimal(amount) * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def create_payment_intent(amount: Decimal) -> dict:
    """
    Create a Stripe payment intent for *amount* dollars.

    Args:
        amount: Amount in dollars; sent to Stripe in cents.

    Returns:
        ``{"id", "client_secret", "amount", "currency", "status"}``.

    Raises:
        ServiceUnavailableError: No Stripe key is configured.
        BadGatewayError: Stripe rejected the key or the request.
    """
    stripe_key = get_stripe_key()
    if not stripe_key:
        raise ServiceUnavailableError(
            "Stripe API key is not configured. Please configure it in the admin panel."
        )

    cents = to_cents(amount)
    currency = settings.STRIPE_CURRENCY
    try:
        intent = stripe.PaymentIntent.create(
            amount=cents,
            currency=currency,
            api_key=stripe_key,
        )
    except stripe.AuthenticationError as exc:
        logger.warning("stripe_authentication_failed", error=str(exc))
        raise BadGatewayError(
            "Invalid Stripe API key. Please check your API key configuration."
        ) from exc
    except stripe.StripeError as exc:
        if exc.code == "api_key_expired":
            logger.warning("stripe_key_expired")
            raise BadGatewayError(
                "Invalid Stripe API key. Please check your API key configuration."
            ) from exc
        logger.warning("stripe_request_failed", code=exc.code, error=str(exc))
        raise BadGatewayError(
            exc.user_message or str(exc) or "Failed to create payment intent with Stripe."
        ) from exc

    logger.info("payment_intent_created", payment_intent_id=intent.id, amount=cents, currency=currency)
    return {
        "id": intent.id,
        "client_secret": intent.client_secret,
        "amount": intent.amount,
        "currency": intent.currency,
        "status": intent.status,
    }


def get_welcome_message() -> str:
    return "Welcome to the stripe-demo plugin"
