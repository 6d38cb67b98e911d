"""
apps.stripe_demo.urls
~~~~~~~~~~~~~~~~~~~~~
Content API routes, mounted at /api/v1/stripe-demo/ by the root URLconf.
"""
from django.urls import path

from .views import PaymentIntentView, WelcomeView

urlpatterns = [
    # GET /api/v1/stripe-demo/
    path("", WelcomeView.as_view(), name="stripe-demo-index"),
    # POST /api/v1/stripe-demo/pay
    path("pay", PaymentIntentView.as_view(), name="stripe-demo-pay"),
]
