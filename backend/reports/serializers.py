from rest_framework import serializers

from orders.serializers import OrderLineSerializer

MONEY = {"max_digits": 14, "decimal_places": 2}


class DailySalesParameterSerializer(serializers.Serializer):
    """Validate daily sales parameters. ``date`` defaults to today in the display timezone."""

    date = serializers.DateField(required=False)
    limit = serializers.IntegerField(required=False, min_value=1, max_value=100)

    def validate(self, data):
        if "date" not in data:
            from .services import TimezoneUtils

            data["date"] = TimezoneUtils.local_today()
        return data


class TopSellingItemSerializer(serializers.Serializer):
    name = serializers.CharField()
    quantity = serializers.IntegerField()
    revenue = serializers.DecimalField(**MONEY)


class HourlyRevenueSerializer(serializers.Serializer):
    hour = serializers.IntegerField()
    amount = serializers.DecimalField(**MONEY)
    count = serializers.IntegerField()


class SoldOrderSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    table_number = serializers.CharField()
    payment_method = serializers.CharField()
    paid_date = serializers.CharField()
    total = serializers.DecimalField(**MONEY)
    items = OrderLineSerializer(many=True)


class DailySalesReportSerializer(serializers.Serializer):
    """Output shape of SalesReportService.aggregate_daily_sales(), money as strings."""

    date = serializers.CharField()
    timezone = serializers.CharField()
    total_revenue = serializers.DecimalField(**MONEY)
    order_count = serializers.IntegerField()
    by_payment_method = serializers.DictField(child=serializers.DecimalField(**MONEY))
    payment_method_counts = serializers.DictField(child=serializers.IntegerField())
    top_selling_items = TopSellingItemSerializer(many=True)
    hourly_revenue = HourlyRevenueSerializer(many=True)
    orders = SoldOrderSerializer(many=True)
