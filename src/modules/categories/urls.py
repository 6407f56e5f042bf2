"""Category URL configuration."""

from __future__ import annotations

from rest_framework.routers import SimpleRouter

from modules.categories.views import CategoryViewSet

router = SimpleRouter(trailing_slash=False)
# Accept both "/categories/1" and "/categories/1/".
router.trailing_slash = "/?"
router.register("categories", CategoryViewSet, basename="category")

urlpatterns = router.urls
