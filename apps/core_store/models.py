"""
apps.core_store.models
~~~~~~~~~~~~~~~~~~~~~~
PluginStoreEntry – key/value rows backing :class:`~apps.core_store.store.PluginStore`.
"""
from django.db import models


class PluginStoreEntry(models.Model):
    """
    One stored value, addressed by ``(type, name, key)``.

    Storage only.  Application code goes through ``PluginStore`` rather than
    querying this table directly.
    """

    class StoreType(models.TextChoices):
        CORE = "core", "Core"
        PLUGIN = "plugin", "Plugin"

    type = models.CharField(max_length=20, choices=StoreType.choices, default=StoreType.PLUGIN)
    name = models.CharField(max_length=100, help_text="Owning plugin id, e.g. 'stripe-demo'.")
    key = models.CharField(max_length=255)
    value = models.JSONField(blank=True, null=True)
    updated_at = models.DateTimeField(auto_now=True, db_index=True)

    class Meta:
        ordering = ["type", "name", "key"]
        unique_together = [("type", "name", "key")]
        verbose_name = "Store Entry"
        verbose_name_plural = "Store Entries"

    def __str__(self) -> str:
        return f"{self.type}::{self.name}.{self.key}"
