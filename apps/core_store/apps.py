"""
apps.core_store.apps
"""
from django.apps import AppConfig


class CoreStoreConfig(AppConfig):
    name = "apps.core_store"
    label = "core_store"
    verbose_name = "Core Store"
