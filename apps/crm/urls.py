"""
URL configuration for CRM app.
"""

from django.urls import path

from . import views

app_name = "crm"

urlpatterns = [
    path("customers", views.CustomerListCreateAPIView.as_view(), name="customer_list"),
    path("customers/<int:pk>", views.CustomerDetailAPIView.as_view(), name="customer_detail"),
]
