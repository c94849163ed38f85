import logging
from decimal import Decimal

from rest_framework import status, viewsets
from rest_framework.decorators import action, api_view
from rest_framework.response import Response

from apps.invisible.decorators import invisible_api
from .serializers import ProductSerializer, ReleaseSerializer

logger = logging.getLogger(__name__)

PRODUCTS = (
    {"sku": "TP-100", "name": "Travel press", "price": Decimal("49.00")},
    {"sku": "GR-210", "name": "Burr grinder", "price": Decimal("129.50")},
)

RELEASES = (
    {"version": "2.3.0", "channel": "stable", "notes": "Faster checkout."},
    {"version": "2.4.0b1", "channel": "beta", "notes": "Gift cards."},
)

BETA_FEATURES = ("gift-cards", "saved-carts")


@api_view(["GET"])
def product_list(request):
    """Public product listing."""

    serializer = ProductSerializer(PRODUCTS, many=True)
    return Response(serializer.data)


@invisible_api("beta")
@api_view(["GET"])
def beta_features(request):
    return Response({"features": list(BETA_FEATURES)})


@invisible_api("internal", "beta")
@api_view(["GET"])
def internal_stats(request):
    """Only reachable for callers matching one of the tagged profiles."""

    return Response(
        {"products": len(PRODUCTS), "releases": len(RELEASES)},
        status=status.HTTP_200_OK,
    )


class ReleaseViewSet(viewsets.ViewSet):
    """Stable releases are public, the beta preview is tagged."""

    def list(self, request):
        stable = [release for release in RELEASES if release["channel"] == "stable"]
        return Response(ReleaseSerializer(stable, many=True).data)

    @invisible_api("beta")
    @action(detail=False, methods=["get"])
    def preview(self, request):
        beta = [release for release in RELEASES if release["channel"] == "beta"]
        logger.info("Serving %d preview release(s)", len(beta))
        return Response(ReleaseSerializer(beta, many=True).data)
