"""
Pytest configuration and fixtures for the activewear shop backend.
"""

from decimal import Decimal

import pytest

from apps.crm.models import Customer
from apps.inventory.models import Product

TEST_PASSWORD = "Str0ng-pass!"


@pytest.fixture(autouse=True)
def media_root(settings, tmp_path):
    """Keep uploaded files out of the source tree."""
    settings.MEDIA_ROOT = tmp_path / "media"


@pytest.fixture
def api_client():
    """
    Fixture for Django REST framework API client.
    """
    from rest_framework.test import APIClient

    return APIClient()


@pytest.fixture
def user(django_user_model):
    return django_user_model.objects.create_user(
        username="testuser",
        email="test@example.com",
        password=TEST_PASSWORD,
        name="Test User",
    )


@pytest.fixture
def authenticated_client(api_client, user):
    """
    API client with a logged-in session.
    """
    api_client.force_login(user)
    return api_client


@pytest.fixture
def make_product(db):
    """Factory for catalog products."""

    def _make_product(**kwargs):
        data = {
            "name": "Legging Preta",
            "category": Product.LEGGINGS,
            "size": "M",
            "color": "Preto",
            "price": Decimal("119.90"),
            "stock": 10,
            "min_stock": 5,
        }
        data.update(kwargs)
        return Product.objects.create(**data)

    return _make_product


@pytest.fixture
def make_customer(db):
    """Factory for customers."""

    def _make_customer(**kwargs):
        data = {
            "name": "Maria Oliveira",
            "email": "maria@example.com",
            "phone": "(11) 98765-4321",
        }
        data.update(kwargs)
        return Customer.objects.create(**data)

    return _make_customer


@pytest.fixture
def product(make_product):
    return make_product()


@pytest.fixture
def customer(make_customer):
    return make_customer()
