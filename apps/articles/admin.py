"""
apps.articles.admin
"""
from django.contrib import admin

from .models import Article


@admin.register(Article)
class ArticleAdmin(admin.ModelAdmin):
    list_display = ["id", "title", "slug", "published_at", "updated_at"]
    list_filter = ["published_at"]
    search_fields = ["title", "slug", "description"]
    readonly_fields = ["id", "created_at", "updated_at"]
    prepopulated_fields = {"slug": ["title"]}
    date_hierarchy = "published_at"
    ordering = ["-updated_at"]
