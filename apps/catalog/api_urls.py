# catalog/api_urls.py
from django.urls import include, path
from rest_framework.routers import DefaultRouter
from .views import ReleaseViewSet, beta_features, internal_stats, product_list

router = DefaultRouter()
router.register(r"releases", ReleaseViewSet, basename="release")

urlpatterns = [
    path("", include(router.urls)),
    path("products/", product_list, name="product-list"),
    path("beta/", beta_features, name="beta-features"),
    path("internal/stats/", internal_stats, name="internal-stats"),
]
