"""
apps.articles.models
~~~~~~~~~~~~~~~~~~~~
Article – the single content type served by the content API.
"""
from django.db import models
from django.utils.text import slugify

#: Slug base for titles that slugify to nothing, e.g. "!!!".
SLUG_FALLBACK = "article"


class Article(models.Model):
    """
    An editorial article.

    Fields
    ------
    title
        Headline shown to readers.
    slug
        URL-safe identifier auto-generated from ``title`` on first save.
    description
        Short teaser text.
    content
        Article body.
    published_at
        Publish timestamp; ``None`` while the article is a draft.
    created_at / updated_at
        Automatic timestamps.
    """

    title = models.CharField(max_length=255)
    slug = models.SlugField(
        max_length=255,
        unique=True,
        blank=True,
        help_text="URL-safe identifier auto-generated from the title.",
    )
    description = models.TextField(blank=True, default="")
    content = models.TextField(blank=True, default="")
    published_at = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["id"]
        verbose_name = "Article"
        verbose_name_plural = "Articles"

    def save(self, *args, **kwargs) -> None:
        """Auto-populate ``slug`` on first save."""
        if not self.slug:
            self.slug = self._unique_slug(slugify(self.title) or SLUG_FALLBACK)
        super().save(*args, **kwargs)

    def _unique_slug(self, base: str) -> str:
        """Return *base*, or *base* suffixed with -2, -3, ... if already taken."""
        max_length = self._meta.get_field("slug").max_length
        candidate = base[:max_length]
        taken = Article.objects.exclude(pk=self.pk)
        n = 2
        while taken.filter(slug=candidate).exists():
            suffix = f"-{n}"
            candidate = f"{base[: max_length - len(suffix)]}{suffix}"
            n += 1
        return candidate

    def __str__(self) -> str:
        return self.title
