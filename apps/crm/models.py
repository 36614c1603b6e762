"""
CRM models for the activewear shop.

Customers are referenced by sales; deleting a customer keeps its sales.
"""

from django.db import models


class Customer(models.Model):
    """
    Customer contact record.

    Only the name is required. ``created_at`` feeds the dashboard's
    "new customers today" figure.
    """

    name = models.CharField(
        max_length=255,
        help_text="Customer's full name",
    )

    email = models.EmailField(
        blank=True,
        help_text="Customer's email address",
    )

    phone = models.CharField(
        max_length=30,
        blank=True,
        help_text="Customer's phone number",
    )

    address = models.TextField(
        blank=True,
        help_text="Postal address",
    )

    # Timestamps
    created_at = models.DateTimeField(
        auto_now_add=True,
        db_index=True,
        help_text="When the customer was registered",
    )

    updated_at = models.DateTimeField(
        auto_now=True,
        help_text="When the customer was last updated",
    )

    class Meta:
        db_table = "customers"
        ordering = ["name"]
        verbose_name = "Customer"
        verbose_name_plural = "Customers"
        indexes = [
            models.Index(fields=["email"], name="customer_email_idx"),
        ]

    def __str__(self):
        return self.name
