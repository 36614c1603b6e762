"""
Tests for the product catalog API.
"""

import io
from decimal import Decimal

from django.core.files.uploadedfile import SimpleUploadedFile
from django.urls import reverse

import pytest
from PIL import Image

from apps.inventory.models import Product
from apps.inventory.serializers import ProductSerializer
from apps.sales.models import Sale, SaleItem
from apps.sales.services import SaleService


def make_image_file(name="legging.png", image_format="PNG"):
    buffer = io.BytesIO()
    Image.new("RGB", (20, 20), color=(200, 30, 90)).save(buffer, format=image_format)
    return SimpleUploadedFile(name, buffer.getvalue(), content_type=f"image/{image_format.lower()}")


@pytest.mark.django_db
class TestProductModel:
    def test_low_stock_boundary(self, make_product):
        at_threshold = make_product(stock=5, min_stock=5)
        above = make_product(stock=6, min_stock=5)
        empty = make_product(stock=0, min_stock=0)

        low_stock = set(Product.objects.low_stock())

        assert at_threshold in low_stock
        assert empty in low_stock
        assert above not in low_stock
        assert at_threshold.is_low_stock()
        assert not above.is_low_stock()

    def test_total_value(self, make_product):
        product = make_product(price=Decimal("89.90"), stock=3)
        assert product.calculate_total_value() == Decimal("269.70")


@pytest.mark.django_db
class TestProductCRUD:
    """Test product list, create, update and delete."""

    def test_list_requires_authentication(self, api_client):
        response = api_client.get(reverse("inventory:product_list"))
        assert response.status_code == 401

    def test_create_product(self, authenticated_client):
        response = authenticated_client.post(
            reverse("inventory:product_list"),
            {
                "name": "Top Esportivo",
                "category": "tops",
                "size": "P",
                "color": "Rosa",
                "price": 89.9,
                "stock": 8,
            },
            format="json",
        )

        assert response.status_code == 201
        data = response.json()
        assert data["minStock"] == Product.DEFAULT_MIN_STOCK
        assert data["isLowStock"] is False
        assert Decimal(str(data["price"])) == Decimal("89.90")
        assert Product.objects.filter(name="Top Esportivo").exists()

    def test_create_requires_fields(self, authenticated_client):
        response = authenticated_client.post(
            reverse("inventory:product_list"), {"name": "Incomplete"}, format="json"
        )

        assert response.status_code == 400
        errors = response.json()["errors"]
        assert "category" in errors
        assert "price" in errors

    @pytest.mark.parametrize(
        "field,value", [("price", -1), ("stock", -3), ("minStock", -1), ("category", "hats")]
    )
    def test_create_rejects_invalid_values(self, authenticated_client, field, value):
        payload = {
            "name": "Shorts",
            "category": "shorts",
            "size": "M",
            "color": "Azul",
            "price": 79.9,
            "stock": 15,
        }
        payload[field] = value

        response = authenticated_client.post(
            reverse("inventory:product_list"), payload, format="json"
        )

        assert response.status_code == 400
        assert field in response.json()["errors"]

    def test_create_with_image(self, authenticated_client):
        response = authenticated_client.post(
            reverse("inventory:product_list"),
            {
                "name": "Legging Estampada",
                "category": "leggings",
                "size": "G",
                "color": "Estampado",
                "price": "129.90",
                "stock": "4",
                "minStock": "2",
                "image": make_image_file(),
            },
            format="multipart",
        )

        assert response.status_code == 201
        product = Product.objects.get(name="Legging Estampada")
        assert product.image.name.startswith("products/")
        assert response.json()["image"].endswith(".png")

    def test_create_rejects_non_image_upload(self, authenticated_client):
        response = authenticated_client.post(
            reverse("inventory:product_list"),
            {
                "name": "Broken",
                "category": "other",
                "size": "U",
                "color": "-",
                "price": "1.00",
                "image": SimpleUploadedFile("notes.png", b"not an image", content_type="image/png"),
            },
            format="multipart",
        )

        assert response.status_code == 400
        assert "image" in response.json()["errors"]

    def test_update_is_partial(self, authenticated_client, product):
        response = authenticated_client.put(
            reverse("inventory:product_detail", args=[product.pk]), {"stock": 3}, format="json"
        )

        assert response.status_code == 200
        product.refresh_from_db()
        assert product.stock == 3
        assert product.name == "Legging Preta"
        assert response.json()["isLowStock"] is True

    def test_edit_keeps_stock_sold_since_it_was_loaded(self, product, customer):
        stale = Product.objects.get(pk=product.pk)
        SaleService().create_sale(
            {"customerId": customer.pk},
            [{"productId": product.pk, "quantity": 3, "price": "119.90"}],
        )

        serializer = ProductSerializer(stale, data={"name": "Renamed"}, partial=True)
        assert serializer.is_valid(), serializer.errors
        serializer.save()

        product.refresh_from_db()
        assert product.name == "Renamed"
        assert product.stock == 7

    def test_retrieve_not_found(self, authenticated_client):
        response = authenticated_client.get(reverse("inventory:product_detail", args=[9999]))
        assert response.status_code == 404
        assert "message" in response.json()

    def test_delete_product(self, authenticated_client, product):
        response = authenticated_client.delete(
            reverse("inventory:product_detail", args=[product.pk])
        )

        assert response.status_code == 204
        assert not Product.objects.filter(pk=product.pk).exists()

    def test_delete_product_keeps_sales(self, authenticated_client, product, customer):
        sale = SaleService().create_sale(
            {"customerId": customer.pk},
            [{"productId": product.pk, "quantity": 1, "price": "119.90"}],
        )

        response = authenticated_client.delete(
            reverse("inventory:product_detail", args=[product.pk])
        )

        assert response.status_code == 204
        assert Sale.objects.filter(pk=sale.pk).exists()
        item = SaleItem.objects.get(sale=sale)
        assert item.product_id is None
        assert item.price == Decimal("119.90")


@pytest.mark.django_db
class TestProductFilters:
    """Test product search and low stock listing."""

    @pytest.fixture
    def catalog(self, make_product):
        return {
            "legging": make_product(name="Legging Preta", color="Preto", stock=12),
            "top": make_product(name="Top Esportivo", category="tops", color="Rosa", stock=3),
            "shoes": make_product(name="Tenis de Corrida", category="shoes", color="Cinza", stock=1),
        }

    def test_search(self, authenticated_client, catalog):
        response = authenticated_client.get(reverse("inventory:product_list"), {"search": "rosa"})

        assert response.status_code == 200
        assert [p["id"] for p in response.json()] == [catalog["top"].pk]

    def test_filter_by_category(self, authenticated_client, catalog):
        response = authenticated_client.get(
            reverse("inventory:product_list"), {"category": "shoes"}
        )
        assert [p["id"] for p in response.json()] == [catalog["shoes"].pk]

    def test_filter_low_stock(self, authenticated_client, catalog):
        response = authenticated_client.get(
            reverse("inventory:product_list"), {"low_stock": "true"}
        )
        ids = {p["id"] for p in response.json()}
        assert ids == {catalog["top"].pk, catalog["shoes"].pk}

    def test_low_stock_endpoint(self, authenticated_client, catalog):
        response = authenticated_client.get(reverse("inventory:low_stock"))

        assert response.status_code == 200
        data = response.json()
        assert {p["id"] for p in data} == {catalog["top"].pk, catalog["shoes"].pk}
        assert all(p["isLowStock"] for p in data)
