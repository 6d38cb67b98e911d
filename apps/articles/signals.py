"""
apps.articles.signals
~~~~~~~~~~~~~~~~~~~~~
Lifecycle hooks for :class:`~apps.articles.models.Article`.

Observational only: each hook logs one event and never touches the record.
"""
import structlog
from django.db.models.signals import post_save, pre_save
from django.dispatch import receiver

from .models import Article

logger = structlog.get_logger(__name__)


@receiver(pre_save, sender=Article, dispatch_uid="article_before_save")
def article_before_save(sender, instance: Article, **kwargs) -> None:
    if instance.pk is None:
        logger.info("article_before_create", title=instance.title)
    else:
        logger.info("article_before_update", article_id=instance.pk, title=instance.title)


@receiver(post_save, sender=Article, dispatch_uid="article_after_save")
def article_after_save(sender, instance: Article, created: bool, **kwargs) -> None:
    event = "article_after_create" if created else "article_after_update"
    logger.info(event, article_id=instance.pk, slug=instance.slug)
