"""
Django admin configuration for sales models.

Sales are recorded through the API. The admin can change a sale's status
and delete sales; deletions go through SaleService so stock is restored.
"""

from django.contrib import admin

from .models import Sale, SaleItem
from .services import SaleService


class SaleItemInline(admin.TabularInline):
    """Inline admin for SaleItem model."""

    model = SaleItem
    extra = 0
    can_delete = False
    readonly_fields = ["product", "quantity", "price", "subtotal"]
    fields = ["product", "quantity", "price", "subtotal"]

    def has_add_permission(self, request, obj=None):
        return False


@admin.register(Sale)
class SaleAdmin(admin.ModelAdmin):
    """Admin interface for Sale model."""

    list_display = ["id", "customer", "date", "total", "status"]
    list_filter = ["status", "date"]
    search_fields = ["id", "customer__name"]
    readonly_fields = ["customer", "date", "total", "created_at", "updated_at"]
    inlines = [SaleItemInline]
    fieldsets = [
        (
            "Sale",
            {
                "fields": ["customer", "date", "total", "status"],
            },
        ),
        (
            "Timestamps",
            {
                "fields": ["created_at", "updated_at"],
                "classes": ["collapse"],
            },
        ),
    ]

    def has_add_permission(self, request):
        return False

    def delete_model(self, request, obj):
        SaleService().delete_sale(obj.pk)

    def delete_queryset(self, request, queryset):
        service = SaleService()
        for sale_id in queryset.values_list("pk", flat=True):
            service.delete_sale(sale_id)
