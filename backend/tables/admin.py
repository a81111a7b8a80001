from django.contrib import admin
from .models import Table


@admin.register(Table)
class TableAdmin(admin.ModelAdmin):
    list_display = ("table_number", "seats", "status", "updated_at")
    list_filter = ("status",)
    search_fields = ("table_number",)
    ordering = ("table_number",)
