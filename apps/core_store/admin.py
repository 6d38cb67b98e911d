"""
apps.core_store.admin
~~~~~~~~~~~~~~~~~~~~~
Read-only listing of store entries.  Values may hold secrets, so they are
never rendered here; plugins expose their own edit pages.
"""
from django.contrib import admin

from .models import PluginStoreEntry


@admin.register(PluginStoreEntry)
class PluginStoreEntryAdmin(admin.ModelAdmin):
    list_display = ["type", "name", "key", "updated_at"]
    list_filter = ["type", "name"]
    search_fields = ["name", "key"]
    fields = ["type", "name", "key", "updated_at"]
    readonly_fields = fields
    ordering = ["type", "name", "key"]

    def has_add_permission(self, request) -> bool:
        return False

    def has_change_permission(self, request, obj=None) -> bool:
        return False
