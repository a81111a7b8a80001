import logging

from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.response import Response

from .serializers import DailySalesParameterSerializer, DailySalesReportSerializer
from .services import SalesReportService

logger = logging.getLogger(__name__)


class ReportViewSet(viewsets.ViewSet):
    """
    Sales reports over settled orders.

    GET /api/reports/daily-sales/?date=YYYY-MM-DD&limit=N
    """

    @action(detail=False, methods=["get"], url_path="daily-sales")
    def daily_sales(self, request):
        """Totals, payment split, top sellers and hourly revenue for one local day"""
        serializer = DailySalesParameterSerializer(data=request.query_params)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        report_date = serializer.validated_data["date"]
        report_data = SalesReportService().generate_daily_sales(
            report_date, top_limit=serializer.validated_data.get("limit")
        )
        return Response(DailySalesReportSerializer(report_data).data, status=status.HTTP_200_OK)
