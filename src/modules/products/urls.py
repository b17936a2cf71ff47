"""Product URL configuration.

Routes (mounted under ``/api/``):

- ``GET    products``       → list
- ``POST   products``       → create
- ``GET    products/{id}``  → retrieve
- ``PUT    products/{id}``  → update
- ``PATCH  products/{id}``  → partial_update (availability)
- ``DELETE products/{id}``  → destroy
"""

from __future__ import annotations

from rest_framework.routers import DefaultRouter

from modules.products.views import ProductViewSet

router = DefaultRouter(trailing_slash=False)
router.register("products", ProductViewSet, basename="product")

urlpatterns = router.urls
