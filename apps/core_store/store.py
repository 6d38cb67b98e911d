"""
apps.core_store.store
~~~~~~~~~~~~~~~~~~~~~
Namespaced key/value settings store.

Usage::

    store = PluginStore(name="stripe-demo")
    store.set("config", {"stripeKey": "sk_test_..."})
    store.get("config")   # -> {"stripeKey": "sk_test_..."}
    store.get("missing")  # -> None
"""
from __future__ import annotations

from typing import Any

from .models import PluginStoreEntry


class PluginStore:
    """Read/write JSON values scoped to one ``(type, name)`` namespace."""

    def __init__(self, name: str, type: str = PluginStoreEntry.StoreType.PLUGIN) -> None:
        self.type = type
        self.name = name

    def get(self, key: str) -> Any | None:
        """Return the value stored under *key*, or ``None`` when absent."""
        entry = PluginStoreEntry.objects.filter(type=self.type, name=self.name, key=key).first()
        return entry.value if entry is not None else None

    def set(self, key: str, value: Any) -> None:
        """Insert or overwrite the value stored under *key*."""
        PluginStoreEntry.objects.update_or_create(
            type=self.type,
            name=self.name,
            key=key,
            defaults={"value": value},
        )

    def __repr__(self) -> str:
        return f"PluginStore(type={self.type!r}, name={self.name!r})"
