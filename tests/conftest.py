"""
Shared fixtures for the article CMS test suite.
"""
from __future__ import annotations

import pytest
from django.conf import settings
from django.contrib.auth.models import Group
from rest_framework.test import APIClient


@pytest.fixture
def api_client() -> APIClient:
    """Return an unauthenticated DRF APIClient."""
    return APIClient()


@pytest.fixture
def super_admin(django_user_model):
    """A Django superuser."""
    return django_user_model.objects.create_superuser(
        username="root", email="root@example.com", password="root-pass"
    )


@pytest.fixture
def role_admin(django_user_model):
    """A staff user granted super-admin rights through the configured group."""
    user = django_user_model.objects.create_user(
        username="role-admin", password="role-pass", is_staff=True
    )
    group, _ = Group.objects.get_or_create(name=settings.SUPER_ADMIN_ROLE)
    user.groups.add(group)
    return user


@pytest.fixture
def editor(django_user_model):
    """A staff user without super-admin rights."""
    return django_user_model.objects.create_user(
        username="editor", password="editor-pass", is_staff=True
    )


@pytest.fixture
def super_admin_client(super_admin) -> APIClient:
    client = APIClient()
    client.force_authenticate(user=super_admin)
    return client


@pytest.fixture
def editor_client(editor) -> APIClient:
    client = APIClient()
    client.force_authenticate(user=editor)
    return client
