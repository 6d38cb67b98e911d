"""
common.crud
~~~~~~~~~~~
Generic CRUD factory for content types.

``create_core_viewset`` binds a model to DRF's ``ModelViewSet`` and returns a
class ready to be registered on a router.  It adds no validation, hooks or
transformation of its own: list / retrieve / create / update /
partial_update / destroy behave exactly as DRF implements them.

Example::

    ArticleViewSet = create_core_viewset(Article, tags=["Articles"])
    router.register("articles", ArticleViewSet, basename="article")
"""
from __future__ import annotations

from collections.abc import Sequence

from django.db import models
from drf_spectacular.utils import extend_schema, extend_schema_view
from rest_framework import serializers, viewsets

#: Columns the framework fills in; never writable through the API.
MANAGED_FIELDS: tuple[str, ...] = ("id", "created_at", "updated_at")


def create_model_serializer(
    model: type[models.Model],
    *,
    read_only_fields: Sequence[str] = MANAGED_FIELDS,
) -> type[serializers.ModelSerializer]:
    """Build a ``ModelSerializer`` exposing every field of *model*."""
    concrete = {f.name for f in model._meta.get_fields() if getattr(f, "concrete", False)}
    meta = type(
        "Meta",
        (),
        {
            "model": model,
            "fields": "__all__",
            "read_only_fields": [name for name in read_only_fields if name in concrete],
        },
    )
    return type(f"{model.__name__}Serializer", (serializers.ModelSerializer,), {"Meta": meta})


def create_core_viewset(
    model: type[models.Model],
    *,
    serializer_class: type[serializers.BaseSerializer] | None = None,
    read_only_fields: Sequence[str] = MANAGED_FIELDS,
    tags: Sequence[str] | None = None,
) -> type[viewsets.ModelViewSet]:
    """
    Return a ``ModelViewSet`` subclass serving the standard CRUD surface for
    *model*.

    Args:
        model: The content-type model to expose.
        serializer_class: Optional explicit serializer.  When omitted one is
            generated with :func:`create_model_serializer`.
        read_only_fields: Fields the generated serializer marks read-only.
        tags: OpenAPI tags.  Defaults to the model's plural verbose name.

    Returns:
        A new viewset class named ``<Model>ViewSet``.
    """
    if serializer_class is None:
        serializer_class = create_model_serializer(model, read_only_fields=read_only_fields)

    viewset = type(
        f"{model.__name__}ViewSet",
        (viewsets.ModelViewSet,),
        {
            "queryset": model._default_manager.all(),
            "serializer_class": serializer_class,
            "__doc__": f"Generic CRUD endpoints for {model._meta.verbose_name_plural}.",
        },
    )

    tag_list = list(tags) if tags else [str(model._meta.verbose_name_plural).title()]
    schema = extend_schema(tags=tag_list)
    return extend_schema_view(
        list=schema,
        retrieve=schema,
        create=schema,
        update=schema,
        partial_update=schema,
        destroy=schema,
    )(viewset)
