"""
apps.articles.views
~~~~~~~~~~~~~~~~~~~
Article endpoints, produced entirely by the generic CRUD factory.
"""
from common.crud import create_core_viewset

from .models import Article

ArticleViewSet = create_core_viewset(Article, tags=["Articles"])
