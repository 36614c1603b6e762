"""
Serializers for inventory models.

Field names are exposed in camelCase to match the API's JSON contract.
"""

from django.conf import settings

from rest_framework import serializers

from apps.core.image_utils import ImageProcessor

from .models import Product


class ProductSerializer(serializers.ModelSerializer):
    """Serializer for Product create, update and detail responses."""

    minStock = serializers.IntegerField(source="min_stock", min_value=0, required=False)
    isLowStock = serializers.BooleanField(source="is_low_stock", read_only=True)
    image = serializers.ImageField(required=False, allow_null=True)

    class Meta:
        model = Product
        fields = [
            "id",
            "name",
            "description",
            "category",
            "size",
            "color",
            "price",
            "stock",
            "minStock",
            "image",
            "isLowStock",
        ]
        read_only_fields = ["id"]

    def validate_image(self, value):
        if value is None:
            return value
        is_valid, error = ImageProcessor.validate_image(value, settings.PRODUCT_IMAGE_MAX_SIZE)
        if not is_valid:
            raise serializers.ValidationError(error)
        return value

    def update(self, instance, validated_data):
        """
        Write only the fields that were sent.

        Stock is also changed by sales through F() updates, so a save of
        every column would put back whatever stock value this request read.
        """
        for attr, value in validated_data.items():
            setattr(instance, attr, value)
        instance.save(update_fields=list(validated_data) + ["updated_at"])
        return instance


class ProductSummarySerializer(serializers.ModelSerializer):
    """Lightweight product representation nested in sale details."""

    class Meta:
        model = Product
        fields = ["id", "name", "category", "size", "color", "price", "image"]
        read_only_fields = fields
