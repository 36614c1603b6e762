"""
Serializers for sales app.

Sales are written through apps.sales.services.SaleService; these
serializers only shape responses and the status update payload.
"""

from rest_framework import serializers

from apps.crm.serializers import CustomerSerializer
from apps.inventory.serializers import ProductSummarySerializer

from .models import Sale, SaleItem


class SaleSerializer(serializers.ModelSerializer):
    """Serializer for sale list and write responses."""

    customerId = serializers.IntegerField(source="customer_id", read_only=True)
    customerName = serializers.SerializerMethodField()

    class Meta:
        model = Sale
        fields = ["id", "customerId", "customerName", "date", "total", "status"]
        read_only_fields = fields

    def get_customerName(self, obj):
        """Get customer name or None when the customer was deleted."""
        return obj.customer.name if obj.customer_id else None


class SaleItemDetailSerializer(serializers.ModelSerializer):
    """Serializer for sale item details with the product sold."""

    saleId = serializers.IntegerField(source="sale_id", read_only=True)
    productId = serializers.IntegerField(source="product_id", read_only=True)
    product = ProductSummarySerializer(read_only=True)
    subtotal = serializers.DecimalField(max_digits=14, decimal_places=2, read_only=True)

    class Meta:
        model = SaleItem
        fields = ["id", "saleId", "productId", "quantity", "price", "subtotal", "product"]
        read_only_fields = fields


class SaleDetailSerializer(SaleSerializer):
    """Serializer for sale details including customer and items."""

    customer = CustomerSerializer(read_only=True)
    items = SaleItemDetailSerializer(many=True, read_only=True)

    class Meta(SaleSerializer.Meta):
        fields = SaleSerializer.Meta.fields + ["customer", "items"]
        read_only_fields = fields


class SaleStatusSerializer(serializers.Serializer):
    """Payload for changing a sale's status."""

    status = serializers.CharField()
