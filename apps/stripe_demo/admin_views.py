"""
apps.stripe_demo.admin_views
~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Server-rendered Stripe configuration page inside the Django admin.

GET shows the redacted current key and an empty form; POST validates,
saves and redirects back.  Outcomes are reported through the admin
messages framework.
"""
import structlog
from django.contrib import admin, messages
from django.core.exceptions import PermissionDenied
from django.shortcuts import redirect
from django.template.response import TemplateResponse

from . import services
from .forms import StripeConfigForm
from .policies import is_super_admin
from .redaction import mask_secret
from .translations import format_message

logger = structlog.get_logger(__name__)


def stripe_config_view(request):
    """Render and process the Stripe configuration form."""
    if not is_super_admin(request.user):
        raise PermissionDenied

    if request.method == "POST":
        form = StripeConfigForm(request.POST)
        if form.is_valid():
            services.save_stripe_key(form.cleaned_data["stripe_key"])
            messages.success(request, format_message("config.save.success"))
            return redirect("stripe-demo-admin-config")
        for error in form.errors.get("stripe_key", []):
            messages.warning(request, error)
        logger.info("stripe_config_form_rejected", user_id=request.user.pk)
    else:
        form = StripeConfigForm()

    context = {
        **admin.site.each_context(request),
        "title": format_message("config.title"),
        "description": format_message("config.description"),
        "current_label": format_message("config.current.label"),
        "save_label": format_message("config.save.button"),
        "masked_key": mask_secret(services.get_stripe_key()),
        "form": form,
    }
    return TemplateResponse(request, "admin/stripe_demo/config.html", context)


# admin_view handles the staff login redirect and never-cache headers.
admin_stripe_config_view = admin.site.admin_view(stripe_config_view)
