import logging

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response

from core_backend.base import ReadOnlyBaseViewSet

from .models import Order
from .serializers import OrderSerializer, SubmitOrderSerializer
from .services import OrderService

logger = logging.getLogger(__name__)


class OrderViewSet(ReadOnlyBaseViewSet):
    """
    Rounds placed at tables.

    GET  /api/orders/?table_id=&status=
    GET  /api/orders/{id}/
    POST /api/orders/   {table_id, items: [{menu_item_id, quantity, note}]}
    """

    queryset = Order.objects.all()
    serializer_class = OrderSerializer
    ordering = ["created_at", "id"]

    def get_queryset(self):
        queryset = Order.objects.all()
        table_id = self.request.query_params.get("table_id")
        if table_id:
            queryset = queryset.filter(table_id=table_id)
        order_status = self.request.query_params.get("status")
        if order_status:
            queryset = queryset.filter(status=order_status)
        return queryset

    def create(self, request: Request) -> Response:
        serializer = SubmitOrderSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        order = OrderService().submit_lines(
            serializer.validated_data["table_id"], serializer.to_lines()
        )
        return Response(OrderSerializer(order).data, status=status.HTTP_201_CREATED)
