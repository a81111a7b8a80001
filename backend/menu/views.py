from rest_framework.decorators import action
from rest_framework.request import Request
from rest_framework.response import Response

from core_backend.base import ReadOnlyBaseViewSet

from .models import MenuItem
from .serializers import MenuItemSerializer
from .services import MenuCatalogService


class MenuItemViewSet(ReadOnlyBaseViewSet):
    """
    The menu as the ordering screen sees it.

    GET /api/menu/items/?category=DRINK&search=tea&available=true

    Filtering and name search go through MenuCatalogService, so the generic
    search and ordering backends are switched off here.
    """

    queryset = MenuItem.objects.all()
    serializer_class = MenuItemSerializer
    filter_backends = []

    def list(self, request: Request) -> Response:
        category = request.query_params.get("category") or None
        search = request.query_params.get("search", "")
        available_only = request.query_params.get("available", "true").lower() != "false"

        service = MenuCatalogService()
        if available_only:
            items = service.orderable_items(category=category, search=search)
        else:
            items = service.list_items(category=category, search=search)
        return Response(MenuItemSerializer(items, many=True).data)

    @action(detail=False, methods=["get"])
    def recommended(self, request: Request) -> Response:
        items = MenuCatalogService().recommended_items()
        return Response(MenuItemSerializer(items, many=True).data)
