"""
Sale engine: records and removes sales while keeping product stock consistent.

Every stock change caused by a sale goes through SaleService:
- create_sale validates the whole request, locks the products involved,
  checks stock for every line and only then writes the sale, its items and
  the stock decrements, all in one transaction.
- delete_sale gives the sold quantities back to the products that still
  exist and removes the sale with its items, in one transaction.
- update_status changes the status only; stock is not touched.
"""

import logging
from collections import namedtuple
from datetime import date as date_type
from datetime import datetime, time
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Dict, List, Mapping, Optional

from django.db import DEFAULT_DB_ALIAS, transaction
from django.db.models import F
from django.utils import timezone
from django.utils.dateparse import parse_date, parse_datetime

from apps.crm.models import Customer
from apps.inventory.models import Product

from .exceptions import (
    EmptySaleError,
    InsufficientStockError,
    InvalidCustomerError,
    InvalidSaleError,
    InvalidSaleItemError,
    SaleNotFoundError,
)
from .models import Sale, SaleItem

logger = logging.getLogger(__name__)

CENTS = Decimal("0.01")

# Largest unit price a SaleItem column can hold (max_digits=10, decimal_places=2)
MAX_ITEM_PRICE = Decimal("99999999.99")

SaleLine = namedtuple("SaleLine", ["product_id", "quantity", "price"])


def _positive_int(value) -> Optional[int]:
    """Return value as a positive int, or None when it is not one."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value > 0 else None
    if isinstance(value, float):
        return int(value) if value.is_integer() and value > 0 else None
    if isinstance(value, str):
        try:
            number = int(value.strip())
        except ValueError:
            return None
        return number if number > 0 else None
    return None


def _positive_price(value) -> Optional[Decimal]:
    """
    Return value as a positive Decimal, or None.

    The price keeps its full precision; it is rounded to cents only when
    stored on a SaleItem.
    """
    if value is None or isinstance(value, bool):
        return None
    try:
        price = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return None
    if not price.is_finite():
        return None
    if price.quantize(CENTS, rounding=ROUND_HALF_UP) <= 0 or price > MAX_ITEM_PRICE:
        return None
    return price


def parse_sale_date(value) -> datetime:
    """
    Interpret a client supplied sale date.

    Accepts datetimes, dates and ISO 8601 strings. Missing or unparseable
    values fall back to the current time; naive values are taken as local
    time.
    """
    parsed = None
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date_type):
        parsed = datetime.combine(value, time.min)
    elif isinstance(value, str) and value.strip():
        text = value.strip()
        try:
            parsed = parse_datetime(text)
            if parsed is None:
                day = parse_date(text)
                if day is not None:
                    parsed = datetime.combine(day, time.min)
        except ValueError:
            parsed = None

    if parsed is None:
        return timezone.now()
    if timezone.is_naive(parsed):
        parsed = timezone.make_aware(parsed)
    return parsed


class SaleService:
    """
    Service class for creating, deleting and updating sales.

    Args:
        using: Database alias all reads, locks and writes go to.
    """

    def __init__(self, using: str = DEFAULT_DB_ALIAS):
        self.using = using

    def create_sale(self, sale_data: Mapping[str, Any], items_data: List[Mapping[str, Any]]) -> Sale:
        """
        Record a sale and decrement stock for every product sold.

        Args:
            sale_data: Proposed sale with ``customerId`` and optional
                ``status`` and ``date``. A client ``total`` is ignored.
            items_data: Lines with ``productId``, ``quantity`` and ``price``.

        Returns:
            Sale: The persisted sale, without its items loaded.

        Raises:
            InvalidCustomerError: customerId is missing, malformed or unknown.
            EmptySaleError: items_data is not a non-empty list.
            InvalidSaleItemError: a line is malformed or names an unknown product.
            InvalidSaleError: the sale payload or its status is invalid.
            InsufficientStockError: a product has less stock than requested.
        """
        if not isinstance(sale_data, Mapping):
            raise InvalidSaleError("Sale data was not provided")

        with transaction.atomic(using=self.using):
            customer = self._get_customer(sale_data.get("customerId"))
            lines = self._parse_lines(items_data)
            sale_status = self._parse_status(sale_data.get("status"))
            sale_date = parse_sale_date(sale_data.get("date"))

            requested: Dict[int, int] = {}
            for line in lines:
                requested[line.product_id] = requested.get(line.product_id, 0) + line.quantity

            products = self._lock_products(requested.keys())
            for product_id in sorted(requested):
                product = products.get(product_id)
                if product is None:
                    raise InvalidSaleItemError(f"Product with ID {product_id} not found")
            for product_id in sorted(requested):
                product = products[product_id]
                if product.stock < requested[product_id]:
                    logger.warning(
                        f"Rejected sale: insufficient stock for product {product.pk} "
                        f"(available {product.stock}, requested {requested[product_id]})"
                    )
                    raise InsufficientStockError(
                        product.pk, product.name, product.stock, requested[product_id]
                    )

            total = sum((line.price * line.quantity for line in lines), Decimal("0.00"))
            total = total.quantize(CENTS, rounding=ROUND_HALF_UP)

            sale = Sale.objects.using(self.using).create(
                customer=customer,
                date=sale_date,
                total=total,
                status=sale_status,
            )
            SaleItem.objects.using(self.using).bulk_create(
                [
                    SaleItem(
                        sale=sale,
                        product_id=line.product_id,
                        quantity=line.quantity,
                        price=line.price.quantize(CENTS, rounding=ROUND_HALF_UP),
                    )
                    for line in lines
                ]
            )

            now = timezone.now()
            for product_id in sorted(requested):
                Product.objects.using(self.using).filter(pk=product_id).update(
                    stock=F("stock") - requested[product_id], updated_at=now
                )

            message = (
                f"Created sale {sale.pk} for customer {customer.pk}: "
                f"{len(lines)} item(s), total {total}, status {sale_status}"
            )
            transaction.on_commit(lambda: logger.info(message), using=self.using)

        return sale

    def delete_sale(self, sale_id) -> None:
        """
        Delete a sale and give its quantities back to the products.

        Items whose product no longer exists are removed without a stock
        change.

        Raises:
            SaleNotFoundError: No sale has this id.
        """
        with transaction.atomic(using=self.using):
            sale = self._lock_sale(sale_id)
            items = list(sale.items.all())

            restock: Dict[int, int] = {}
            for item in items:
                if item.product_id is None:
                    continue
                restock[item.product_id] = restock.get(item.product_id, 0) + item.quantity

            existing = self._lock_products(restock.keys())
            now = timezone.now()
            for product_id in sorted(restock):
                if product_id not in existing:
                    continue
                Product.objects.using(self.using).filter(pk=product_id).update(
                    stock=F("stock") + restock[product_id], updated_at=now
                )

            SaleItem.objects.using(self.using).filter(sale=sale).delete()
            sale.delete(using=self.using)

        logger.info(f"Deleted sale {sale_id} and restored stock for {len(restock)} product(s)")

    def update_status(self, sale_id, status) -> Sale:
        """
        Change a sale's status. Stock levels are not affected.

        Raises:
            SaleNotFoundError: No sale has this id.
            InvalidSaleError: status is not one of the sale status choices.
        """
        with transaction.atomic(using=self.using):
            sale = self._lock_sale(sale_id)
            if not isinstance(status, str) or status not in Sale.STATUS_VALUES:
                raise InvalidSaleError(f"Invalid status: {status}")

            previous = sale.status
            sale.status = status
            sale.save(using=self.using, update_fields=["status", "updated_at"])

        logger.info(f"Sale {sale.pk} status changed from {previous} to {status}")
        return sale

    def _get_customer(self, raw_customer_id) -> Customer:
        customer_id = _positive_int(raw_customer_id)
        if customer_id is None:
            raise InvalidCustomerError()
        customer = Customer.objects.using(self.using).filter(pk=customer_id).first()
        if customer is None:
            raise InvalidCustomerError(f"Customer with ID {customer_id} not found")
        return customer

    def _parse_lines(self, items_data) -> List[SaleLine]:
        if not isinstance(items_data, (list, tuple)) or not items_data:
            raise EmptySaleError()

        lines = []
        for index, item in enumerate(items_data):
            if not isinstance(item, Mapping):
                raise InvalidSaleItemError(f"Item {index + 1} is not an object")

            product_id = _positive_int(item.get("productId"))
            if product_id is None:
                raise InvalidSaleItemError(f"Item {index + 1}: invalid product ID")

            quantity = _positive_int(item.get("quantity"))
            if quantity is None:
                raise InvalidSaleItemError(f"Item {index + 1}: invalid quantity")

            price = _positive_price(item.get("price"))
            if price is None:
                raise InvalidSaleItemError(f"Item {index + 1}: invalid price")

            lines.append(SaleLine(product_id, quantity, price))
        return lines

    def _parse_status(self, raw_status) -> str:
        if raw_status is None or raw_status == "":
            return Sale.PENDING
        if not isinstance(raw_status, str) or raw_status not in Sale.STATUS_VALUES:
            raise InvalidSaleError(f"Invalid status: {raw_status}")
        return raw_status

    def _lock_products(self, product_ids) -> Dict[int, Product]:
        """Lock the given products in primary key order and return them by id."""
        ids = sorted(product_ids)
        if not ids:
            return {}
        queryset = (
            Product.objects.using(self.using)
            .select_for_update()
            .filter(pk__in=ids)
            .order_by("pk")
        )
        return {product.pk: product for product in queryset}

    def _lock_sale(self, sale_id) -> Sale:
        pk = _positive_int(sale_id)
        sale = None
        if pk is not None:
            sale = Sale.objects.using(self.using).select_for_update().filter(pk=pk).first()
        if sale is None:
            raise SaleNotFoundError(f"Sale with ID {sale_id} not found")
        return sale
