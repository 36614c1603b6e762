"""
Sales models for the activewear shop's point of sale.

A Sale owns its SaleItems. Each item snapshots the unit price charged at
sale time; the sale total is computed server-side from the items. Sales
are written only through apps.sales.services.SaleService so that product
stock stays consistent with recorded sales.
"""

from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models
from django.db.models import Q
from django.utils import timezone

from apps.crm.models import Customer
from apps.inventory.models import Product


class Sale(models.Model):
    """
    Sale model for tracking point-of-sale transactions.

    The customer reference is checked when the sale is created; deleting the
    customer later keeps the sale with a NULL customer.
    """

    # Status choices
    PENDING = "pending"
    COMPLETED = "completed"
    CANCELLED = "cancelled"

    STATUS_CHOICES = [
        (PENDING, "Pending"),
        (COMPLETED, "Completed"),
        (CANCELLED, "Cancelled"),
    ]

    STATUS_VALUES = {PENDING, COMPLETED, CANCELLED}

    customer = models.ForeignKey(
        Customer,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="sales",
        help_text="Customer who made the purchase",
    )

    date = models.DateTimeField(
        default=timezone.now,
        db_index=True,
        help_text="When the sale took place",
    )

    total = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.00"))],
        help_text="Sum of price * quantity over all items, rounded to cents",
    )

    status = models.CharField(
        max_length=20,
        choices=STATUS_CHOICES,
        default=PENDING,
        help_text="Current sale status",
    )

    # Timestamps
    created_at = models.DateTimeField(
        auto_now_add=True,
        help_text="When the sale was recorded",
    )

    updated_at = models.DateTimeField(
        auto_now=True,
        help_text="When the sale was last updated",
    )

    class Meta:
        db_table = "sales"
        ordering = ["-date", "-id"]
        verbose_name = "Sale"
        verbose_name_plural = "Sales"
        indexes = [
            models.Index(fields=["status"], name="sale_status_idx"),
            models.Index(fields=["customer", "-date"], name="sale_cust_date_idx"),
        ]
        constraints = [
            models.CheckConstraint(condition=Q(total__gte=0), name="sale_total_non_negative"),
        ]

    def __str__(self):
        return f"Sale #{self.pk} - {self.total}"

    def calculate_total(self):
        """Recompute the total from the sale's items."""
        return sum((item.subtotal for item in self.items.all()), Decimal("0.00"))

    def is_completed(self):
        return self.status == self.COMPLETED

    def is_cancelled(self):
        return self.status == self.CANCELLED


class SaleItem(models.Model):
    """
    Sale item model for tracking individual products in a sale.

    The product reference becomes NULL when the product is deleted; the
    quantity and price snapshot are kept.
    """

    sale = models.ForeignKey(
        Sale,
        on_delete=models.CASCADE,
        related_name="items",
        help_text="Sale that this item belongs to",
    )

    product = models.ForeignKey(
        Product,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="sale_items",
        help_text="Product that was sold",
    )

    quantity = models.PositiveIntegerField(
        validators=[MinValueValidator(1)],
        help_text="Quantity sold",
    )

    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.01"))],
        help_text="Unit price at time of sale (may differ from current product price)",
    )

    class Meta:
        db_table = "sale_items"
        ordering = ["id"]
        verbose_name = "Sale Item"
        verbose_name_plural = "Sale Items"
        indexes = [
            models.Index(fields=["sale"], name="saleitem_sale_idx"),
            models.Index(fields=["product"], name="saleitem_product_idx"),
        ]
        constraints = [
            models.CheckConstraint(condition=Q(quantity__gte=1), name="saleitem_quantity_positive"),
            models.CheckConstraint(condition=Q(price__gt=0), name="saleitem_price_positive"),
        ]

    def __str__(self):
        product_name = self.product.name if self.product_id else "Deleted product"
        return f"{product_name} x {self.quantity}"

    @property
    def subtotal(self):
        """Line total (price * quantity)."""
        return self.price * self.quantity
