from django.conf import settings
from django.urls import include, path


api_routes = [
    path("catalog/", include("apps.catalog.api_urls")),
]


urlpatterns = [
    path(f"{settings.HTTP_ROUTE}api/v1/", include(api_routes)),
]
