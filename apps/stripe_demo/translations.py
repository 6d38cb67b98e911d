"""
apps.stripe_demo.translations
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Message ids and English defaults for the configuration panel.

Defaults go through Django's i18n, so a compiled locale catalog
translates them.  A caller may also pass its own ``{message_id: text}``
mapping to :func:`format_message`; control flow never depends on the text.
"""
from __future__ import annotations

from collections.abc import Mapping

from django.utils.translation import gettext_lazy as _

from .constants import PLUGIN_ID

DEFAULT_MESSAGES: dict[str, str] = {
    "config.title": _("Stripe Configuration"),
    "config.description": _(
        "Configure your Stripe API key. Only super administrators can access this page."
    ),
    "config.key.label": _("Stripe API Key"),
    "config.key.placeholder": _("Enter your Stripe API key (e.g., sk_test_...)"),
    "config.key.hint": _(
        "Your Stripe API key starts with sk_test_ for test mode or sk_live_ for live mode"
    ),
    "config.current.label": _("Current Configuration:"),
    "config.save.button": _("Save Configuration"),
    "config.validation.required": _("Stripe key is required"),
    "config.validation.format": _("Stripe key should start with sk_test_ or sk_live_"),
    "config.load.error": _("Failed to load configuration"),
    "config.save.error": _("Failed to save configuration"),
    "config.save.success": _("Stripe key saved successfully"),
}


def get_translation(message_id: str) -> str:
    """Return the plugin-scoped id, e.g. ``stripe-demo.config.save.error``."""
    return f"{PLUGIN_ID}.{message_id}"


def format_message(message_id: str, overrides: Mapping[str, str] | None = None) -> str:
    """
    Resolve *message_id* to display text.

    *overrides* may be keyed by the bare id or by its plugin-scoped form.
    Unknown ids fall back to the id itself so a missing entry is visible
    rather than fatal.
    """
    if overrides:
        for candidate in (message_id, get_translation(message_id)):
            if candidate in overrides:
                return str(overrides[candidate])
    return str(DEFAULT_MESSAGES.get(message_id, message_id))
