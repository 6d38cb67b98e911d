"""
apps.stripe_demo.apps
"""
from django.apps import AppConfig


class StripeDemoConfig(AppConfig):
    name = "apps.stripe_demo"
    label = "stripe_demo"
    verbose_name = "Stripe Demo"
