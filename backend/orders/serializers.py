from rest_framework import serializers

from core_backend.base import TimestampedSerializer

from .models import Order


class OrderLineSerializer(serializers.Serializer):
    """Read-only view of an OrderLine (dataclass or its dict form)."""

    menu_item_id = serializers.IntegerField()
    name = serializers.CharField()
    price = serializers.DecimalField(max_digits=10, decimal_places=2)
    quantity = serializers.IntegerField()
    note = serializers.CharField(allow_blank=True)


class OrderSerializer(TimestampedSerializer):
    items = OrderLineSerializer(source="lines", many=True, read_only=True)

    class Meta:
        model = Order
        fields = [
            "id",
            "table_id",
            "table_number",
            "items",
            "total",
            "status",
            "payment_method",
            "paid_date",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class SubmitOrderItemSerializer(serializers.Serializer):
    menu_item_id = serializers.IntegerField()
    quantity = serializers.IntegerField(min_value=1, default=1)
    note = serializers.CharField(allow_blank=True, required=False, default="")


class SubmitOrderSerializer(serializers.Serializer):
    """
    Payload for submitting a cart. An empty ``items`` list is accepted here
    and rejected by the service as EmptyCartError.
    """

    table_id = serializers.IntegerField()
    items = SubmitOrderItemSerializer(many=True, allow_empty=True)

    def to_lines(self):
        return [
            (item["menu_item_id"], item["quantity"], item.get("note", ""))
            for item in self.validated_data["items"]
        ]
