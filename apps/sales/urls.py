"""
URL configuration for sales app.
"""

from django.urls import path

from . import views

app_name = "sales"

urlpatterns = [
    path("sales", views.SaleListCreateView.as_view(), name="sale_list"),
    path("sales/by-date-range", views.sales_by_date_range, name="sales_by_date_range"),
    path("sales/<int:pk>", views.SaleDetailView.as_view(), name="sale_detail"),
]
