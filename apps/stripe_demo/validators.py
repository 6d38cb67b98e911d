"""
apps.stripe_demo.validators
~~~~~~~~~~~~~~~~~~~~~~~~~~~
Format rules for a Stripe secret key, shared by the admin page and the
configuration panel.  Rules run in order and the first failure wins:

1. ``required`` – the trimmed key is empty.
2. ``format``   – the trimmed key does not start with a known prefix.
"""
from __future__ import annotations

from .constants import STRIPE_KEY_PREFIXES


class StripeKeyValidationError(ValueError):
    """Raised when a candidate key breaks one of the rules above."""

    def __init__(self, rule: str) -> None:
        self.rule = rule
        super().__init__(rule)

    @property
    def message_id(self) -> str:
        return f"config.validation.{self.rule}"


def clean_stripe_key(candidate: str | None) -> str:
    """Return the trimmed key, or raise :class:`StripeKeyValidationError`."""
    trimmed = (candidate or "").strip()
    if not trimmed:
        raise StripeKeyValidationError("required")
    if not trimmed.startswith(STRIPE_KEY_PREFIXES):
        raise StripeKeyValidationError("format")
    return trimmed
