"""
Serializers for CRM models.
"""

from django.db.models import Sum

from rest_framework import serializers

from .models import Customer


class CustomerSerializer(serializers.ModelSerializer):
    """Serializer for customer list, create and update."""

    createdAt = serializers.DateTimeField(source="created_at", read_only=True)

    class Meta:
        model = Customer
        fields = ["id", "name", "email", "phone", "address", "createdAt"]
        read_only_fields = ["id"]


class CustomerDetailSerializer(CustomerSerializer):
    """Customer with a summary of their purchase history."""

    salesCount = serializers.SerializerMethodField()
    totalSpent = serializers.SerializerMethodField()

    class Meta(CustomerSerializer.Meta):
        fields = CustomerSerializer.Meta.fields + ["salesCount", "totalSpent"]

    def get_salesCount(self, obj):
        return obj.sales.count()

    def get_totalSpent(self, obj):
        return obj.sales.aggregate(total=Sum("total"))["total"] or 0
