from rest_framework import serializers

from core_backend.base import TimestampedSerializer
from orders.serializers import OrderSerializer

from .models import Table


class TableSerializer(TimestampedSerializer):
    class Meta:
        model = Table
        fields = ["id", "table_number", "seats", "status", "created_at", "updated_at"]
        read_only_fields = ["id", "created_at", "updated_at"]


class TableCreateSerializer(serializers.Serializer):
    """New tables always start EMPTY, so status is not accepted here."""

    table_number = serializers.CharField(max_length=20)
    seats = serializers.IntegerField(min_value=1, default=4)


class TableUpdateSerializer(serializers.Serializer):
    table_number = serializers.CharField(max_length=20, required=False)
    seats = serializers.IntegerField(min_value=1, required=False)
    status = serializers.ChoiceField(choices=Table.TableStatus.choices, required=False)


class TableRoundSerializer(serializers.Serializer):
    round = serializers.IntegerField()
    order = OrderSerializer()
