"""
Views for dashboard figures and PDF reports.
"""

import logging

from django.http import HttpResponse

from rest_framework import permissions, status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response

from apps.inventory.serializers import ProductSerializer

from .pdf import InventoryReportPDF, SalesReportPDF
from .services import (
    DashboardService,
    InventoryReportService,
    SalesReportService,
    parse_report_date,
)

logger = logging.getLogger(__name__)


def pdf_response(pdf_bytes: bytes, filename: str) -> HttpResponse:
    response = HttpResponse(pdf_bytes, content_type="application/pdf")
    response["Content-Disposition"] = f'attachment; filename="{filename}"'
    return response


@api_view(["GET"])
@permission_classes([permissions.IsAuthenticated])
def dashboard_stats(request):
    """
    Today's figures: sales total, new customers, units sold and the number
    of products at or below their minimum stock.
    """
    return Response(DashboardService().get_stats(), status=status.HTTP_200_OK)


@api_view(["GET"])
@permission_classes([permissions.IsAuthenticated])
def dashboard_low_stock(request):
    products = InventoryReportService().get_low_stock_products()
    serializer = ProductSerializer(products, many=True, context={"request": request})
    return Response(serializer.data, status=status.HTTP_200_OK)


@api_view(["GET"])
@permission_classes([permissions.IsAuthenticated])
def sales_report_pdf(request):
    """
    Download the sales report for a range of days as PDF.

    Query parameters:
    - startDate: first day, defaults to today
    - endDate: last day, defaults to today
    """
    try:
        start = parse_report_date(request.query_params.get("startDate"))
        end = parse_report_date(request.query_params.get("endDate"))
    except ValueError as exc:
        return Response({"message": str(exc)}, status=status.HTTP_400_BAD_REQUEST)

    if start > end:
        return Response(
            {"message": "startDate must not be after endDate"},
            status=status.HTTP_400_BAD_REQUEST,
        )

    report_service = SalesReportService()
    sales = report_service.sales_between(start, end).select_related("customer")
    summary = report_service.summarize(sales)
    pdf_bytes = SalesReportPDF(sales, start, end, summary).generate_pdf()

    logger.info(f"Sales report {start} to {end} generated for user {request.user.pk}")
    return pdf_response(pdf_bytes, f"sales-report-{start:%Y%m%d}-{end:%Y%m%d}.pdf")


@api_view(["GET"])
@permission_classes([permissions.IsAuthenticated])
def inventory_report_pdf(request):
    """Download the inventory report as PDF."""
    report_service = InventoryReportService()
    pdf_bytes = InventoryReportPDF(
        report_service.get_summary(),
        report_service.get_low_stock_products(),
        report_service.get_products(),
    ).generate_pdf()

    logger.info(f"Inventory report generated for user {request.user.pk}")
    return pdf_response(pdf_bytes, "inventory-report.pdf")
