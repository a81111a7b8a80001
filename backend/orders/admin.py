from django.contrib import admin
from .models import Order


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    """
    Admin configuration for the Order model. Orders are written by the
    ordering and settlement flows only, so everything is read-only here.
    """

    list_display = ("id", "table_number", "status", "total", "payment_method", "paid_date", "created_at")
    list_filter = ("status", "payment_method")
    search_fields = ("table_number",)
    readonly_fields = (
        "table_id",
        "table_number",
        "items",
        "total",
        "status",
        "payment_method",
        "paid_date",
        "created_at",
        "updated_at",
    )

    def has_add_permission(self, request):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
