"""
Tests for dashboard figures and PDF reports.
"""

from datetime import date, timedelta
from decimal import Decimal
from unittest.mock import patch

from django.urls import reverse
from django.utils import timezone

import pytest

from apps.reporting.pdf import InventoryReportPDF, NumberedCanvas, SalesReportPDF
from apps.reporting.services import (
    DashboardService,
    InventoryReportService,
    SalesReportService,
    parse_report_date,
)
from apps.sales.services import SaleService


@pytest.fixture
def todays_sale(customer, make_product):
    product = make_product(name="Product A", stock=5, min_stock=5)
    return SaleService().create_sale(
        {"customerId": customer.pk, "status": "completed"},
        [{"productId": product.pk, "quantity": 3, "price": "10.00"}],
    )


@pytest.mark.django_db
class TestDashboardService:
    def test_stats_for_today(self, todays_sale, customer, make_product):
        old_date = (timezone.now() - timedelta(days=3)).isoformat()
        other = make_product(name="Product B", stock=20)
        SaleService().create_sale(
            {"customerId": customer.pk, "date": old_date},
            [{"productId": other.pk, "quantity": 4, "price": "50.00"}],
        )

        stats = DashboardService().get_stats()

        assert stats["totalSalesToday"] == Decimal("30.00")
        assert stats["productsSoldToday"] == 3
        assert stats["newCustomersToday"] == 1
        assert stats["lowStockProductsCount"] == 1

    def test_pending_and_cancelled_sales_count_towards_total(self, customer, product):
        service = SaleService()
        for sale_status in ["pending", "cancelled"]:
            service.create_sale(
                {"customerId": customer.pk, "status": sale_status},
                [{"productId": product.pk, "quantity": 1, "price": "25.00"}],
            )

        assert DashboardService().get_total_sales_today() == Decimal("50.00")

    def test_empty_day(self, db):
        service = DashboardService(day=date(2020, 1, 1))

        assert service.get_total_sales_today() == Decimal("0.00")
        assert service.get_products_sold_today() == 0
        assert service.get_new_customers_today() == 0


@pytest.mark.django_db
class TestReportServices:
    def test_sales_summary(self, customer, product):
        service = SaleService()
        lines = [("completed", "10.00"), ("pending", "20.00"), ("cancelled", "5.00")]
        for sale_status, price in lines:
            service.create_sale(
                {"customerId": customer.pk, "status": sale_status},
                [{"productId": product.pk, "quantity": 1, "price": price}],
            )

        report = SalesReportService()
        summary = report.summarize(report.sales_between())

        assert summary["sales_count"] == 3
        assert summary["total_value"] == Decimal("35.00")
        assert summary["completed_count"] == 1
        assert summary["completed_value"] == Decimal("10.00")
        assert summary["pending_count"] == 1
        assert summary["cancelled_count"] == 1

    def test_sales_between_is_inclusive(self, customer, product):
        service = SaleService()
        for day in ["2024-03-01T00:00:00", "2024-03-02T23:59:59", "2024-03-03T00:00:00"]:
            service.create_sale(
                {"customerId": customer.pk, "date": day},
                [{"productId": product.pk, "quantity": 1, "price": "10.00"}],
            )

        sales = SalesReportService().sales_between(date(2024, 3, 1), date(2024, 3, 2))

        assert sales.count() == 2

    def test_inventory_summary(self, make_product):
        make_product(price=Decimal("10.00"), stock=3, min_stock=5)
        make_product(price=Decimal("20.00"), stock=0, min_stock=1)
        make_product(price=Decimal("5.50"), stock=10, min_stock=2)

        summary = InventoryReportService().get_summary()

        assert summary["total_products"] == 3
        assert summary["total_stock"] == 13
        assert summary["low_stock_count"] == 2
        assert summary["out_of_stock_count"] == 1
        assert summary["total_value"] == Decimal("85.00")


class TestParseReportDate:
    def test_date(self):
        assert parse_report_date("2024-03-01") == date(2024, 3, 1)

    def test_datetime(self):
        assert parse_report_date("2024-03-01T10:00:00") == date(2024, 3, 1)

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_missing_means_today(self, value):
        assert parse_report_date(value) == timezone.localdate()

    @pytest.mark.parametrize("value", ["tomorrow", "2024-02-30", "01/03/2024"])
    def test_invalid(self, value):
        with pytest.raises(ValueError):
            parse_report_date(value)


@pytest.mark.django_db
class TestDashboardAPI:
    def test_stats_requires_authentication(self, api_client):
        response = api_client.get(reverse("reporting:dashboard_stats"))
        assert response.status_code == 401

    def test_stats(self, authenticated_client, todays_sale):
        response = authenticated_client.get(reverse("reporting:dashboard_stats"))

        assert response.status_code == 200
        data = response.json()
        assert set(data) == {
            "totalSalesToday",
            "newCustomersToday",
            "productsSoldToday",
            "lowStockProductsCount",
        }
        assert Decimal(str(data["totalSalesToday"])) == Decimal("30.00")
        assert data["productsSoldToday"] == 3

    def test_low_stock(self, authenticated_client, make_product):
        low = make_product(name="Tenis de Corrida", stock=1, min_stock=3)
        make_product(name="Shorts", stock=15, min_stock=5)

        response = authenticated_client.get(reverse("reporting:dashboard_low_stock"))

        assert response.status_code == 200
        assert [p["id"] for p in response.json()] == [low.pk]


@pytest.mark.django_db
class TestPDFReports:
    def test_sales_report_pdf(self, authenticated_client, todays_sale):
        today = timezone.localdate().isoformat()

        response = authenticated_client.get(
            reverse("reporting:sales_report_pdf"), {"startDate": today, "endDate": today}
        )

        assert response.status_code == 200
        assert response["Content-Type"] == "application/pdf"
        assert "sales-report-" in response["Content-Disposition"]
        assert response.content.startswith(b"%PDF")

    def test_sales_report_pdf_without_sales(self, authenticated_client):
        response = authenticated_client.get(
            reverse("reporting:sales_report_pdf"),
            {"startDate": "2020-01-01", "endDate": "2020-01-31"},
        )

        assert response.status_code == 200
        assert response.content.startswith(b"%PDF")

    def test_sales_report_invalid_date(self, authenticated_client):
        response = authenticated_client.get(
            reverse("reporting:sales_report_pdf"), {"startDate": "someday"}
        )

        assert response.status_code == 400
        assert "Invalid date" in response.json()["message"]

    def test_sales_report_reversed_range(self, authenticated_client):
        response = authenticated_client.get(
            reverse("reporting:sales_report_pdf"),
            {"startDate": "2024-03-05", "endDate": "2024-03-01"},
        )
        assert response.status_code == 400

    def test_inventory_report_pdf(self, authenticated_client, make_product):
        make_product(name="Legging Preta", stock=12)
        make_product(name="Tenis de Corrida", stock=1, min_stock=3)

        response = authenticated_client.get(reverse("reporting:inventory_report_pdf"))

        assert response.status_code == 200
        assert response["Content-Disposition"] == 'attachment; filename="inventory-report.pdf"'
        assert response.content.startswith(b"%PDF")

    def test_reports_require_authentication(self, api_client):
        assert api_client.get(reverse("reporting:sales_report_pdf")).status_code == 401
        assert api_client.get(reverse("reporting:inventory_report_pdf")).status_code == 401

    def test_long_sales_report_spans_pages(self, customer, make_product):
        product = make_product(stock=500)
        service = SaleService()
        for _ in range(80):
            service.create_sale(
                {"customerId": customer.pk},
                [{"productId": product.pk, "quantity": 1, "price": "10.00"}],
            )
        report = SalesReportService()
        sales = report.sales_between().select_related("customer")
        today = timezone.localdate()

        with patch.object(NumberedCanvas, "draw_page_footer", autospec=True) as footer:
            pdf_bytes = SalesReportPDF(sales, today, today, report.summarize(sales)).generate_pdf()

        assert pdf_bytes.startswith(b"%PDF")
        page_counts = [call.args[1] for call in footer.call_args_list]
        assert len(page_counts) >= 2
        assert set(page_counts) == {len(page_counts)}

    def test_inventory_report_with_empty_catalog(self, db):
        report = InventoryReportService()

        pdf_bytes = InventoryReportPDF(
            report.get_summary(), report.get_low_stock_products(), report.get_products()
        ).generate_pdf()

        assert pdf_bytes.startswith(b"%PDF")
