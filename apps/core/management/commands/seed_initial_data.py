"""
Management command to seed an empty database with an admin account and demo data.
"""

import os
from decimal import Decimal

from django.core.management.base import BaseCommand
from django.db import transaction

from apps.core.models import User
from apps.crm.models import Customer
from apps.inventory.models import Product
from apps.sales.services import SaleService

DEMO_PRODUCTS = [
    {
        "name": "Legging Preta",
        "description": "Legging preta de alta compressão, ideal para treinos intensos",
        "category": Product.LEGGINGS,
        "size": "M",
        "color": "Preto",
        "price": Decimal("119.90"),
        "stock": 12,
        "min_stock": 5,
    },
    {
        "name": "Top Esportivo",
        "description": "Top esportivo com suporte médio, perfeito para atividades físicas",
        "category": Product.TOPS,
        "size": "P",
        "color": "Rosa",
        "price": Decimal("89.90"),
        "stock": 8,
        "min_stock": 5,
    },
    {
        "name": "Tênis de Corrida",
        "description": "Tênis leve e confortável para corridas de longa distância",
        "category": Product.SHOES,
        "size": "38",
        "color": "Cinza",
        "price": Decimal("249.90"),
        "stock": 1,
        "min_stock": 3,
    },
    {
        "name": "Shorts Esportivo",
        "description": "Shorts confortável para atividades físicas intensas",
        "category": Product.SHORTS,
        "size": "M",
        "color": "Azul",
        "price": Decimal("79.90"),
        "stock": 15,
        "min_stock": 5,
    },
]

DEMO_CUSTOMERS = [
    {
        "name": "Maria Oliveira",
        "email": "maria@example.com",
        "phone": "(11) 98765-4321",
        "address": "Rua das Flores, 123 - São Paulo, SP",
    },
    {
        "name": "João Silva",
        "email": "joao@example.com",
        "phone": "(11) 91234-5678",
        "address": "Av. Paulista, 1000 - São Paulo, SP",
    },
    {
        "name": "Carla Mendes",
        "email": "carla@example.com",
        "phone": "(21) 99876-5432",
        "address": "Rua do Sol, 456 - Rio de Janeiro, RJ",
    },
    {
        "name": "Pedro Costa",
        "email": "pedro@example.com",
        "phone": "(31) 98765-1234",
        "address": "Rua dos Ipês, 789 - Belo Horizonte, MG",
    },
]


class Command(BaseCommand):
    help = "Create the admin user and demo catalog when the database has no users"

    def add_arguments(self, parser):
        parser.add_argument(
            "--admin-password",
            type=str,
            default=os.getenv("SEED_ADMIN_PASSWORD", "admin123"),
            help="Password for the admin account (default: $SEED_ADMIN_PASSWORD or admin123)",
        )
        parser.add_argument(
            "--with-sales",
            action="store_true",
            help="Also record a few demo sales through the sale service",
        )

    def handle(self, *args, **options):
        if User.objects.exists():
            self.stdout.write(self.style.WARNING("Users already exist, skipping seed"))
            return

        with transaction.atomic():
            self._create_admin(options["admin_password"])
            products = self._create_products()
            customers = self._create_customers()

        sales_created = 0
        if options["with_sales"]:
            sales_created = self._create_sales(products, customers)

        self.stdout.write(
            self.style.SUCCESS(
                f"Seeded admin user, {len(products)} products, "
                f"{len(customers)} customers and {sales_created} sales"
            )
        )

    def _create_admin(self, password):
        """Create admin user."""
        user = User.objects.create_superuser(
            username="admin",
            email="admin@hlgfitness.com",
            password=password,
            name="Administrador",
            role=User.ADMIN,
        )
        self.stdout.write(f"Created admin user: {user.username}")
        return user

    def _create_products(self):
        return [Product.objects.create(**data) for data in DEMO_PRODUCTS]

    def _create_customers(self):
        return [Customer.objects.create(**data) for data in DEMO_CUSTOMERS]

    def _create_sales(self, products, customers):
        """Record demo sales so stock levels reflect them."""
        service = SaleService()
        baskets = [
            (customers[0], "completed", [(products[0], 2), (products[1], 1)]),
            (customers[1], "completed", [(products[1], 1)]),
            (customers[2], "pending", [(products[0], 2), (products[3], 3)]),
            (customers[3], "completed", [(products[3], 2)]),
        ]
        for customer, sale_status, lines in baskets:
            service.create_sale(
                {"customerId": customer.pk, "status": sale_status},
                [
                    {"productId": product.pk, "quantity": quantity, "price": product.price}
                    for product, quantity in lines
                ],
            )
        return len(baskets)
