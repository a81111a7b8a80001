import logging

from rest_framework import viewsets
from rest_framework.decorators import action
from rest_framework.request import Request
from rest_framework.response import Response

from .serializers import BillSerializer, SettleRequestSerializer, SettlementResultSerializer
from .services import SettlementService

logger = logging.getLogger(__name__)


class SettlementViewSet(viewsets.ViewSet):
    """
    Bill, receipt and settlement for one table, addressed by table id.

    GET  /api/payments/tables/{table_id}/bill/
    GET  /api/payments/tables/{table_id}/receipt/
    POST /api/payments/tables/{table_id}/settle/   {payment_method}
    """

    lookup_field = "table_id"
    lookup_value_regex = r"\d+"

    @action(detail=True, methods=["get"])
    def bill(self, request: Request, table_id=None) -> Response:
        bill = SettlementService().compute_bill(int(table_id))
        return Response(BillSerializer(bill).data)

    @action(detail=True, methods=["get"])
    def receipt(self, request: Request, table_id=None) -> Response:
        table_id = int(table_id)
        return Response({
            "table_id": table_id,
            "receipt": SettlementService().receipt(table_id),
        })

    @action(detail=True, methods=["post"])
    def settle(self, request: Request, table_id=None) -> Response:
        serializer = SettleRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = SettlementService().settle(
            int(table_id), serializer.validated_data["payment_method"]
        )
        return Response(SettlementResultSerializer(result).data)
