"""
apps.articles.urls
~~~~~~~~~~~~~~~~~~
Mounted at /api/v1/ by the root URLconf.

GET    /articles/        – list
POST   /articles/        – create
GET    /articles/<id>/   – retrieve
PUT    /articles/<id>/   – update
PATCH  /articles/<id>/   – partial update
DELETE /articles/<id>/   – delete
"""
from rest_framework.routers import SimpleRouter

from .views import ArticleViewSet

router = SimpleRouter()
router.register("articles", ArticleViewSet, basename="article")

urlpatterns = router.urls
