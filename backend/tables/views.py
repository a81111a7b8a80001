import logging

from rest_framework import status
from rest_framework.decorators import action
from rest_framework.request import Request
from rest_framework.response import Response

from core_backend.base import BaseViewSet

from .models import Table
from .serializers import (
    TableCreateSerializer,
    TableRoundSerializer,
    TableSerializer,
    TableUpdateSerializer,
)
from .services import TableService

logger = logging.getLogger(__name__)


class TableViewSet(BaseViewSet):
    """
    Floor tables. Writes go through TableService so status changes are
    signalled and manual EMPTY overrides are reported.
    """

    queryset = Table.objects.all()
    serializer_class = TableSerializer
    search_fields = ["table_number"]
    ordering_fields = ["table_number", "status", "seats"]
    ordering = ["table_number"]

    def get_queryset(self):
        queryset = super().get_queryset()
        table_status = self.request.query_params.get("status")
        if table_status:
            queryset = queryset.filter(status=table_status)
        return queryset

    def create(self, request: Request) -> Response:
        serializer = TableCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        table = TableService().create_table(**serializer.validated_data)
        return Response(TableSerializer(table).data, status=status.HTTP_201_CREATED)

    def update(self, request: Request, pk=None, partial=False) -> Response:
        serializer = TableUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        service = TableService()
        orphaned = service.update_table(pk, **serializer.validated_data)

        data = TableSerializer(service.get_table(pk)).data
        data["orphaned_orders"] = orphaned
        if orphaned:
            data["warning"] = (
                f"{orphaned} outstanding order(s) remain unpaid for this table"
            )
        return Response(data)

    def partial_update(self, request: Request, pk=None) -> Response:
        return self.update(request, pk=pk, partial=True)

    def destroy(self, request: Request, pk=None) -> Response:
        TableService().delete_table(pk)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @action(detail=False, methods=["get"])
    def summary(self, request: Request) -> Response:
        """Number of tables in each status."""
        return Response(TableService().status_summary())

    @action(detail=True, methods=["get"])
    def rounds(self, request: Request, pk=None) -> Response:
        """Outstanding rounds for the table, numbered from 1."""
        from orders.services import OrderService

        TableService().get_table(pk)
        rounds = [
            {"round": number, "order": order}
            for number, order in OrderService().rounds(pk)
        ]
        return Response(TableRoundSerializer(rounds, many=True).data)
