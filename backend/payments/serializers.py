from rest_framework import serializers

from orders.models import Order
from orders.serializers import OrderLineSerializer, OrderSerializer


class BillSerializer(serializers.Serializer):
    table_id = serializers.IntegerField()
    table_number = serializers.CharField()
    rounds = OrderSerializer(many=True)
    lines = OrderLineSerializer(many=True)
    item_count = serializers.IntegerField()
    grand_total = serializers.DecimalField(max_digits=12, decimal_places=2)


class SettleRequestSerializer(serializers.Serializer):
    payment_method = serializers.ChoiceField(choices=Order.PaymentMethod.choices)


class SettlementResultSerializer(serializers.Serializer):
    bill = BillSerializer()
    payment_method = serializers.CharField()
    paid_date = serializers.DateTimeField()
    paid_order_ids = serializers.ListField(child=serializers.IntegerField())
