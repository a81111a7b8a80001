from django.contrib import admin
from .models import MenuItem


@admin.register(MenuItem)
class MenuItemAdmin(admin.ModelAdmin):
    list_display = ("name", "category", "price", "is_available", "is_recommended")
    list_filter = ("category", "is_available", "is_recommended")
    search_fields = ("name", "description")
    list_editable = ("is_available", "is_recommended")
