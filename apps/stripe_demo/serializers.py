"""
apps.stripe_demo.serializers
~~~~~~~~~~~~~~~~~~~~~~~~~~~~
I/O-only serializers for the stripe-demo API.
Field names follow the admin client's camelCase wire format.
"""
from decimal import Decimal

from rest_framework import serializers

STRIPE_KEY_ERROR = "Stripe key is required and must be a string"


class StrictCharField(serializers.CharField):
    """A ``CharField`` that rejects numbers instead of coercing them to text."""

    def to_internal_value(self, data):
        if not isinstance(data, str):
            self.fail("invalid")
        return super().to_internal_value(data)


# ---------------------------------------------------------------------------
# Admin: config
# ---------------------------------------------------------------------------

class StripeConfigSerializer(serializers.Serializer):
    """Response shape for GET /stripe-demo/config/."""

    stripeKey = serializers.CharField(allow_null=True)


class SaveStripeConfigRequestSerializer(serializers.Serializer):
    """Validates PUT /stripe-demo/config/ request body."""

    stripeKey = StrictCharField(
        error_messages={
            "required": STRIPE_KEY_ERROR,
            "null": STRIPE_KEY_ERROR,
            "blank": STRIPE_KEY_ERROR,
            "invalid": STRIPE_KEY_ERROR,
        },
    )


class MessageResponseSerializer(serializers.Serializer):
    message = serializers.CharField()


# ---------------------------------------------------------------------------
# Content API: payments
# ---------------------------------------------------------------------------

class PaymentIntentRequestSerializer(serializers.Serializer):
    """Validates POST /stripe-demo/pay request body.  Amount is in dollars."""

    amount = serializers.DecimalField(
        max_digits=12,
        decimal_places=2,
        min_value=Decimal("0.01"),
    )


class PaymentIntentSerializer(serializers.Serializer):
    id = serializers.CharField()
    client_secret = serializers.CharField(allow_null=True)
    amount = serializers.IntegerField(help_text="Amount in cents.")
    currency = serializers.CharField()
    status = serializers.CharField()
