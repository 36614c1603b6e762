"""
Views for customer management.
"""

import logging

from django.db.models import Q

from rest_framework import generics, permissions

from .models import Customer
from .serializers import CustomerDetailSerializer, CustomerSerializer

logger = logging.getLogger(__name__)


class CustomerListCreateAPIView(generics.ListCreateAPIView):
    """
    API endpoint for listing and creating customers.

    Supports ``?search=`` over name, email and phone.
    """

    serializer_class = CustomerSerializer
    permission_classes = [permissions.IsAuthenticated]

    def get_queryset(self):
        queryset = Customer.objects.all()

        search = self.request.query_params.get("search")
        if search:
            queryset = queryset.filter(
                Q(name__icontains=search) | Q(email__icontains=search) | Q(phone__icontains=search)
            )

        return queryset

    def perform_create(self, serializer):
        customer = serializer.save()
        logger.info(f"Created customer {customer.pk} ({customer.name})")


class CustomerDetailAPIView(generics.RetrieveUpdateDestroyAPIView):
    """
    API endpoint for customer detail, update and delete.

    PUT applies the fields sent. Sales of a deleted customer are kept.
    """

    queryset = Customer.objects.all()
    permission_classes = [permissions.IsAuthenticated]

    def get_serializer_class(self):
        if self.request.method == "GET":
            return CustomerDetailSerializer
        return CustomerSerializer

    def update(self, request, *args, **kwargs):
        kwargs["partial"] = True
        return super().update(request, *args, **kwargs)

    def perform_destroy(self, instance):
        logger.info(f"Deleting customer {instance.pk} ({instance.name})")
        instance.delete()
