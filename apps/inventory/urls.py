"""
URL configuration for inventory app.
"""

from django.urls import path

from . import views

app_name = "inventory"

urlpatterns = [
    path("products", views.ProductListCreateView.as_view(), name="product_list"),
    path("products/<int:pk>", views.ProductDetailView.as_view(), name="product_detail"),
    path("products-low-stock", views.low_stock_products, name="low_stock"),
]
