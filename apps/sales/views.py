"""
Views for sales app.

Sale creation, deletion and status changes are delegated to SaleService;
its errors are returned as JSON bodies with a ``message`` key.
"""

import logging

from django.db.models import Prefetch

from rest_framework import generics, permissions, status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response

from apps.reporting.services import SalesReportService, parse_report_date

from .exceptions import SaleError
from .models import Sale, SaleItem
from .serializers import SaleDetailSerializer, SaleSerializer, SaleStatusSerializer
from .services import SaleService

logger = logging.getLogger(__name__)


def sale_error_response(exc):
    """Translate a sale engine error into an API response."""
    return Response(exc.to_dict(), status=exc.status_code)


class SaleListCreateView(generics.ListAPIView):
    """
    API endpoint for listing sales (newest first) and recording new ones.

    POST body::

        {"sale": {"customerId": 1, "status": "pending", "date": "..."},
         "items": [{"productId": 3, "quantity": 2, "price": 119.9}]}
    """

    serializer_class = SaleSerializer
    permission_classes = [permissions.IsAuthenticated]

    def get_queryset(self):
        return Sale.objects.select_related("customer").order_by("-date", "-id")

    def post(self, request, *args, **kwargs):
        payload = request.data if isinstance(request.data, dict) else {}

        try:
            sale = SaleService().create_sale(payload.get("sale"), payload.get("items"))
        except SaleError as exc:
            logger.info(f"Sale rejected for user {request.user.pk}: {exc.message}")
            return sale_error_response(exc)
        except Exception:
            logger.exception("Unexpected error while creating sale")
            return Response(
                {"message": "Error creating sale"},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

        return Response(SaleSerializer(sale).data, status=status.HTTP_201_CREATED)


class SaleDetailView(generics.RetrieveAPIView):
    """
    API endpoint for a single sale.

    - GET returns the sale with its customer and items (each with product)
    - PUT changes the status only
    - DELETE removes the sale and restores stock
    """

    serializer_class = SaleDetailSerializer
    permission_classes = [permissions.IsAuthenticated]

    def get_queryset(self):
        return Sale.objects.select_related("customer").prefetch_related(
            Prefetch("items", queryset=SaleItem.objects.select_related("product"))
        )

    def put(self, request, pk):
        serializer = SaleStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            sale = SaleService().update_status(pk, serializer.validated_data["status"])
        except SaleError as exc:
            return sale_error_response(exc)
        except Exception:
            logger.exception(f"Unexpected error while updating sale {pk}")
            return Response(
                {"message": "Error updating sale"},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

        return Response(SaleSerializer(sale).data, status=status.HTTP_200_OK)

    def delete(self, request, pk):
        try:
            SaleService().delete_sale(pk)
        except SaleError as exc:
            return sale_error_response(exc)
        except Exception:
            logger.exception(f"Unexpected error while deleting sale {pk}")
            return Response(
                {"message": "Error deleting sale"},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

        return Response(status=status.HTTP_204_NO_CONTENT)


@api_view(["GET"])
@permission_classes([permissions.IsAuthenticated])
def sales_by_date_range(request):
    """
    List sales between two days, inclusive.

    Query parameters:
    - startDate: first day (YYYY-MM-DD or ISO datetime), defaults to today
    - endDate: last day, defaults to today
    """
    try:
        start = parse_report_date(request.query_params.get("startDate"))
        end = parse_report_date(request.query_params.get("endDate"))
    except ValueError as exc:
        return Response({"message": str(exc)}, status=status.HTTP_400_BAD_REQUEST)

    sales = SalesReportService().sales_between(start, end).select_related("customer")
    return Response(SaleSerializer(sales, many=True).data, status=status.HTTP_200_OK)
