"""
apps.stripe_demo.policies
~~~~~~~~~~~~~~~~~~~~~~~~~
Super-administrator check guarding the plugin's admin routes and page.
"""
from __future__ import annotations

import structlog
from django.conf import settings
from django.db import DatabaseError
from rest_framework.permissions import BasePermission

logger = structlog.get_logger(__name__)


def is_super_admin(user) -> bool:
    """
    Return ``True`` when *user* may manage the Stripe configuration.

    A user qualifies if authenticated and either a Django superuser or a
    member of the ``SUPER_ADMIN_ROLE`` group.  A failed role lookup is
    logged and denies access.
    """
    if user is None or not user.is_authenticated or not user.pk:
        return False
    if user.is_superuser:
        return True
    try:
        return user.groups.filter(name=settings.SUPER_ADMIN_ROLE).exists()
    except DatabaseError as exc:
        logger.error("super_admin_check_failed", user_id=user.pk, error=str(exc))
        return False


class IsSuperAdmin(BasePermission):
    """DRF permission wrapper around :func:`is_super_admin`."""

    message = "Only super administrators can access the Stripe configuration."

    def has_permission(self, request, view) -> bool:
        return is_super_admin(request.user)
