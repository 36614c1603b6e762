"""
URL configuration for authentication endpoints.
"""

from django.urls import path

from . import views

app_name = "core"

urlpatterns = [
    path("register", views.register, name="register"),
    path("login", views.login_view, name="login"),
    path("logout", views.logout_view, name="logout"),
    path("user", views.UserProfileView.as_view(), name="user"),
]
