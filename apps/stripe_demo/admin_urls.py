"""
apps.stripe_demo.admin_urls
~~~~~~~~~~~~~~~~~~~~~~~~~~~
Admin routes, mounted at /stripe-demo/ by the root URLconf.
Only super administrators pass the policy on these views.
"""
from django.urls import path

from .views import StripeConfigView

urlpatterns = [
    # GET / PUT /stripe-demo/config/
    path("config/", StripeConfigView.as_view(), name="stripe-demo-config"),
]
