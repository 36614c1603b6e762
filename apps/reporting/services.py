"""
Reporting services for the activewear shop.

- DashboardService: figures for the current local calendar day
- SalesReportService: sales within a range of days and their summary
- InventoryReportService: stock levels and valuation

Day boundaries are local midnights in settings.TIME_ZONE. All figures are
computed from the database on every call.
"""

import logging
from datetime import date, datetime, time, timedelta
from decimal import Decimal
from typing import Any, Dict, Optional, Tuple

from django.db.models import Count, DecimalField, ExpressionWrapper, F, Q, Sum
from django.db.models.functions import Coalesce
from django.utils import timezone
from django.utils.dateparse import parse_date, parse_datetime

from apps.crm.models import Customer
from apps.inventory.models import Product
from apps.sales.models import Sale, SaleItem

logger = logging.getLogger(__name__)

ZERO = Decimal("0.00")


def parse_report_date(value: Optional[str]) -> date:
    """
    Parse a report date parameter.

    Accepts ``YYYY-MM-DD`` or an ISO 8601 datetime (converted to the local
    day). Missing values mean today.

    Raises:
        ValueError: The value is present but not a valid date.
    """
    if value is None or not value.strip():
        return timezone.localdate()

    text = value.strip()
    try:
        day = parse_date(text)
        if day is not None:
            return day
        moment = parse_datetime(text)
    except ValueError:
        moment = None

    if moment is None:
        raise ValueError(f"Invalid date: {value}")
    if timezone.is_naive(moment):
        return moment.date()
    return timezone.localtime(moment).date()


def local_day_bounds(day: date) -> Tuple[datetime, datetime]:
    """Return [local midnight of day, local midnight of the next day)."""
    tz = timezone.get_current_timezone()
    start = timezone.make_aware(datetime.combine(day, time.min), tz)
    end = timezone.make_aware(datetime.combine(day + timedelta(days=1), time.min), tz)
    return start, end


class DashboardService:
    """
    Daily figures shown on the dashboard.

    Args:
        day: Local calendar day to report on. Defaults to today.
    """

    def __init__(self, day: Optional[date] = None):
        self.day = day or timezone.localdate()
        self.start, self.end = local_day_bounds(self.day)

    def _todays_sales(self):
        return Sale.objects.filter(date__gte=self.start, date__lt=self.end)

    def get_total_sales_today(self) -> Decimal:
        """Sum of the totals of sales dated today, whatever their status."""
        result = self._todays_sales().aggregate(total=Sum("total"))
        return result["total"] or ZERO

    def get_products_sold_today(self) -> int:
        """Sum of item quantities over today's sales."""
        result = SaleItem.objects.filter(
            sale__date__gte=self.start, sale__date__lt=self.end
        ).aggregate(quantity=Sum("quantity"))
        return result["quantity"] or 0

    def get_new_customers_today(self) -> int:
        return Customer.objects.filter(created_at__gte=self.start, created_at__lt=self.end).count()

    def get_low_stock_count(self) -> int:
        return Product.objects.low_stock().count()

    def get_stats(self) -> Dict[str, Any]:
        return {
            "totalSalesToday": self.get_total_sales_today(),
            "newCustomersToday": self.get_new_customers_today(),
            "productsSoldToday": self.get_products_sold_today(),
            "lowStockProductsCount": self.get_low_stock_count(),
        }


class SalesReportService:
    """
    Sales over a range of days.
    """

    def sales_between(self, start: Optional[date] = None, end: Optional[date] = None):
        """
        Sales dated from the start of ``start`` to the end of ``end``,
        newest first. Missing bounds default to today.
        """
        today = timezone.localdate()
        range_start, _ = local_day_bounds(start or today)
        _, range_end = local_day_bounds(end or today)
        return Sale.objects.filter(date__gte=range_start, date__lt=range_end).order_by(
            "-date", "-id"
        )

    def summarize(self, sales) -> Dict[str, Any]:
        """
        Summary figures for a queryset of sales.

        Returns:
            dict with sales_count, total_value, completed_count,
            completed_value, pending_count and cancelled_count.
        """
        totals = sales.aggregate(
            sales_count=Count("id"),
            total_value=Coalesce(Sum("total"), ZERO, output_field=DecimalField()),
            completed_count=Count("id", filter=Q(status=Sale.COMPLETED)),
            completed_value=Coalesce(
                Sum("total", filter=Q(status=Sale.COMPLETED)), ZERO, output_field=DecimalField()
            ),
            pending_count=Count("id", filter=Q(status=Sale.PENDING)),
            cancelled_count=Count("id", filter=Q(status=Sale.CANCELLED)),
        )
        return totals


class InventoryReportService:
    """
    Stock levels and valuation of the whole catalog.
    """

    def get_summary(self) -> Dict[str, Any]:
        """
        Returns:
            dict with total_products, total_stock, low_stock_count,
            out_of_stock_count and total_value (stock valued at price).
        """
        stock_value = ExpressionWrapper(
            F("price") * F("stock"), output_field=DecimalField(max_digits=18, decimal_places=2)
        )
        summary = Product.objects.aggregate(
            total_products=Count("id"),
            total_stock=Coalesce(Sum("stock"), 0),
            out_of_stock_count=Count("id", filter=Q(stock=0)),
            total_value=Coalesce(Sum(stock_value), ZERO, output_field=DecimalField()),
        )
        summary["low_stock_count"] = Product.objects.low_stock().count()
        return summary

    def get_low_stock_products(self):
        return Product.objects.low_stock().order_by("stock", "name")

    def get_products(self):
        return Product.objects.order_by("category", "name")
