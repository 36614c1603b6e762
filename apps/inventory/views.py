"""
Views for the product catalog.

- Product list with search and filters
- Product create/update (JSON or multipart with an image) and delete
- Low stock listing
"""

import logging

from django.db.models import Q

from rest_framework import generics, permissions, status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser
from rest_framework.response import Response

from .models import Product
from .serializers import ProductSerializer

logger = logging.getLogger(__name__)


class ProductListCreateView(generics.ListCreateAPIView):
    """
    API endpoint for listing and creating products.

    Supports:
    - Search by name, description, color
    - Filter by category, low_stock
    """

    serializer_class = ProductSerializer
    permission_classes = [permissions.IsAuthenticated]
    parser_classes = [JSONParser, MultiPartParser, FormParser]

    def get_queryset(self):
        queryset = Product.objects.all()

        search = self.request.query_params.get("search", None)
        if search:
            queryset = queryset.filter(
                Q(name__icontains=search)
                | Q(description__icontains=search)
                | Q(color__icontains=search)
            )

        category = self.request.query_params.get("category", None)
        if category:
            queryset = queryset.filter(category=category)

        low_stock = self.request.query_params.get("low_stock", None)
        if low_stock and low_stock.lower() in ["true", "1", "yes"]:
            queryset = queryset.low_stock()

        return queryset

    def perform_create(self, serializer):
        product = serializer.save()
        logger.info(f"Created product {product.pk} ({product.name})")


class ProductDetailView(generics.RetrieveUpdateDestroyAPIView):
    """
    API endpoint for retrieving, updating and deleting a single product.

    PUT applies the fields sent and leaves the others unchanged. Sales that
    reference a deleted product are kept.
    """

    queryset = Product.objects.all()
    serializer_class = ProductSerializer
    permission_classes = [permissions.IsAuthenticated]
    parser_classes = [JSONParser, MultiPartParser, FormParser]

    def get_queryset(self):
        queryset = Product.objects.all()
        # Lock the row when stock is being set so it cannot race a sale
        if self.request.method in ("PUT", "PATCH") and "stock" in self.request.data:
            queryset = queryset.select_for_update()
        return queryset

    def update(self, request, *args, **kwargs):
        kwargs["partial"] = True
        return super().update(request, *args, **kwargs)

    def perform_destroy(self, instance):
        logger.info(f"Deleting product {instance.pk} ({instance.name})")
        instance.delete()


@api_view(["GET"])
@permission_classes([permissions.IsAuthenticated])
def low_stock_products(request):
    """
    List products at or below their minimum stock threshold.
    """
    products = Product.objects.low_stock()
    serializer = ProductSerializer(products, many=True, context={"request": request})
    return Response(serializer.data, status=status.HTTP_200_OK)
