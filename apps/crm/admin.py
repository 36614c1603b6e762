"""
Admin configuration for CRM models.
"""

from django.contrib import admin

from .models import Customer


@admin.register(Customer)
class CustomerAdmin(admin.ModelAdmin):
    """Admin interface for Customer."""

    list_display = ["name", "email", "phone", "created_at"]
    list_filter = ["created_at"]
    search_fields = ["name", "email", "phone"]
    readonly_fields = ["created_at", "updated_at"]
    ordering = ["-created_at"]
