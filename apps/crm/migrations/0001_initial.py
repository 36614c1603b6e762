# Initial schema for customer records

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Customer",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True, primary_key=True, serialize=False, verbose_name="ID"
                    ),
                ),
                ("name", models.CharField(help_text="Customer's full name", max_length=255)),
                (
                    "email",
                    models.EmailField(
                        blank=True, help_text="Customer's email address", max_length=254
                    ),
                ),
                (
                    "phone",
                    models.CharField(blank=True, help_text="Customer's phone number", max_length=30),
                ),
                ("address", models.TextField(blank=True, help_text="Postal address")),
                (
                    "created_at",
                    models.DateTimeField(
                        auto_now_add=True,
                        db_index=True,
                        help_text="When the customer was registered",
                    ),
                ),
                (
                    "updated_at",
                    models.DateTimeField(
                        auto_now=True, help_text="When the customer was last updated"
                    ),
                ),
            ],
            options={
                "verbose_name": "Customer",
                "verbose_name_plural": "Customers",
                "db_table": "customers",
                "ordering": ["name"],
                "indexes": [models.Index(fields=["email"], name="customer_email_idx")],
            },
        ),
    ]
