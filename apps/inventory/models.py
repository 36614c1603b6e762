"""
Inventory models for the activewear shop.

The Product catalog holds what the shop sells and how many units are on
hand. Stock is changed by direct edits from the catalog screens and, for
sales, only by apps.sales.services.SaleService.
"""

from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models
from django.db.models import F, Q


def product_image_upload_path(instance, filename):
    return f"products/{filename}"


class ProductQuerySet(models.QuerySet):
    def low_stock(self):
        """Products whose stock is at or below their minimum stock level."""
        return self.filter(stock__lte=F("min_stock"))

    def out_of_stock(self):
        return self.filter(stock=0)


class Product(models.Model):
    """
    A catalog product with its price and current stock level.
    """

    # Category choices
    LEGGINGS = "leggings"
    TOPS = "tops"
    SHORTS = "shorts"
    PANTS = "pants"
    ACCESSORIES = "accessories"
    SHOES = "shoes"
    OTHER = "other"

    CATEGORY_CHOICES = [
        (LEGGINGS, "Leggings"),
        (TOPS, "Tops"),
        (SHORTS, "Shorts"),
        (PANTS, "Pants"),
        (ACCESSORIES, "Accessories"),
        (SHOES, "Shoes"),
        (OTHER, "Other"),
    ]

    DEFAULT_MIN_STOCK = 5

    name = models.CharField(
        max_length=255,
        help_text="Product name",
    )

    description = models.TextField(
        blank=True,
        help_text="Optional description of the product",
    )

    category = models.CharField(
        max_length=20,
        choices=CATEGORY_CHOICES,
        help_text="Product category",
    )

    size = models.CharField(
        max_length=20,
        help_text="Size label (e.g., P, M, G, 38)",
    )

    color = models.CharField(
        max_length=50,
        help_text="Color name",
    )

    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.00"))],
        help_text="Current selling price",
    )

    # Inventory tracking
    stock = models.IntegerField(
        default=0,
        validators=[MinValueValidator(0)],
        help_text="Units currently in stock",
    )

    min_stock = models.IntegerField(
        default=DEFAULT_MIN_STOCK,
        validators=[MinValueValidator(0)],
        help_text="Minimum stock threshold for low stock alerts",
    )

    image = models.ImageField(
        upload_to=product_image_upload_path,
        null=True,
        blank=True,
        help_text="Optional product picture (JPEG, PNG or GIF)",
    )

    # Timestamps
    created_at = models.DateTimeField(
        auto_now_add=True,
        help_text="When the product was added to the catalog",
    )

    updated_at = models.DateTimeField(
        auto_now=True,
        help_text="When the product was last updated",
    )

    objects = ProductQuerySet.as_manager()

    class Meta:
        db_table = "products"
        ordering = ["id"]
        verbose_name = "Product"
        verbose_name_plural = "Products"
        indexes = [
            models.Index(fields=["category"], name="product_category_idx"),
            models.Index(fields=["stock", "min_stock"], name="product_low_stock_idx"),
        ]
        constraints = [
            models.CheckConstraint(condition=Q(stock__gte=0), name="product_stock_non_negative"),
            models.CheckConstraint(
                condition=Q(min_stock__gte=0), name="product_min_stock_non_negative"
            ),
            models.CheckConstraint(condition=Q(price__gte=0), name="product_price_non_negative"),
        ]

    def __str__(self):
        return f"{self.name} ({self.size}, {self.color})"

    def is_low_stock(self):
        """Check if product is at or below its minimum stock threshold."""
        return self.stock <= self.min_stock

    def is_out_of_stock(self):
        """Check if product is out of stock."""
        return self.stock == 0

    def calculate_total_value(self):
        """Calculate stock value at the current price (price * stock)."""
        return self.price * self.stock
