"""
URL configuration for reporting app.
"""

from django.urls import path

from . import views

app_name = "reporting"

urlpatterns = [
    path("dashboard/stats", views.dashboard_stats, name="dashboard_stats"),
    path("dashboard/low-stock", views.dashboard_low_stock, name="dashboard_low_stock"),
    path("reports/sales.pdf", views.sales_report_pdf, name="sales_report_pdf"),
    path("reports/inventory.pdf", views.inventory_report_pdf, name="inventory_report_pdf"),
]
