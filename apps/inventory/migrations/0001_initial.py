# Initial schema for the product catalog

from decimal import Decimal

import django.core.validators
from django.db import migrations, models

import apps.inventory.models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Product",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True, primary_key=True, serialize=False, verbose_name="ID"
                    ),
                ),
                ("name", models.CharField(help_text="Product name", max_length=255)),
                (
                    "description",
                    models.TextField(blank=True, help_text="Optional description of the product"),
                ),
                (
                    "category",
                    models.CharField(
                        choices=[
                            ("leggings", "Leggings"),
                            ("tops", "Tops"),
                            ("shorts", "Shorts"),
                            ("pants", "Pants"),
                            ("accessories", "Accessories"),
                            ("shoes", "Shoes"),
                            ("other", "Other"),
                        ],
                        help_text="Product category",
                        max_length=20,
                    ),
                ),
                (
                    "size",
                    models.CharField(help_text="Size label (e.g., P, M, G, 38)", max_length=20),
                ),
                ("color", models.CharField(help_text="Color name", max_length=50)),
                (
                    "price",
                    models.DecimalField(
                        decimal_places=2,
                        help_text="Current selling price",
                        max_digits=10,
                        validators=[django.core.validators.MinValueValidator(Decimal("0.00"))],
                    ),
                ),
                (
                    "stock",
                    models.IntegerField(
                        default=0,
                        help_text="Units currently in stock",
                        validators=[django.core.validators.MinValueValidator(0)],
                    ),
                ),
                (
                    "min_stock",
                    models.IntegerField(
                        default=5,
                        help_text="Minimum stock threshold for low stock alerts",
                        validators=[django.core.validators.MinValueValidator(0)],
                    ),
                ),
                (
                    "image",
                    models.ImageField(
                        blank=True,
                        help_text="Optional product picture (JPEG, PNG or GIF)",
                        null=True,
                        upload_to=apps.inventory.models.product_image_upload_path,
                    ),
                ),
                (
                    "created_at",
                    models.DateTimeField(
                        auto_now_add=True, help_text="When the product was added to the catalog"
                    ),
                ),
                (
                    "updated_at",
                    models.DateTimeField(
                        auto_now=True, help_text="When the product was last updated"
                    ),
                ),
            ],
            options={
                "verbose_name": "Product",
                "verbose_name_plural": "Products",
                "db_table": "products",
                "ordering": ["id"],
                "indexes": [
                    models.Index(fields=["category"], name="product_category_idx"),
                    models.Index(fields=["stock", "min_stock"], name="product_low_stock_idx"),
                ],
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(("stock__gte", 0)), name="product_stock_non_negative"
                    ),
                    models.CheckConstraint(
                        condition=models.Q(("min_stock__gte", 0)),
                        name="product_min_stock_non_negative",
                    ),
                    models.CheckConstraint(
                        condition=models.Q(("price__gte", 0)), name="product_price_non_negative"
                    ),
                ],
            },
        ),
    ]
