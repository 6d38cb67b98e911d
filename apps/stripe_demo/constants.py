"""
apps.stripe_demo.constants
"""
#: Plugin identifier; namespaces the admin routes and the store entries.
PLUGIN_ID = "stripe-demo"

#: Store key holding ``{"stripeKey": ...}``.
CONFIG_STORE_KEY = "config"

#: Accepted secret-key prefixes: test mode, then live mode.
STRIPE_KEY_PREFIXES = ("sk_test_", "sk_live_")
