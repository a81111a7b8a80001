from core_backend.base import TimestampedSerializer

from .models import MenuItem


class MenuItemSerializer(TimestampedSerializer):
    class Meta:
        model = MenuItem
        fields = [
            "id",
            "name",
            "description",
            "price",
            "category",
            "image_url",
            "is_recommended",
            "is_available",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields
