"""
Admin configuration for inventory models.
"""

from django.contrib import admin

from .models import Product


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    """Admin interface for Product."""

    list_display = ["name", "category", "size", "color", "price", "stock", "min_stock"]
    list_filter = ["category", "created_at"]
    search_fields = ["name", "description", "color"]
    readonly_fields = ["created_at", "updated_at"]
    fieldsets = (
        (
            "Basic Information",
            {
                "fields": ("name", "description", "category", "size", "color", "image"),
            },
        ),
        (
            "Pricing & Stock",
            {
                "fields": ("price", "stock", "min_stock"),
            },
        ),
        (
            "Timestamps",
            {
                "fields": ("created_at", "updated_at"),
                "classes": ("collapse",),
            },
        ),
    )
