"""
URL configuration for app API endpoints.
"""

from django.urls import path

from api.v1.app import views

app_name = "app_api"

urlpatterns = [
    path(
        "activate",
        views.RedeemView.as_view(),
        name="activate",
    ),
    path(
        "account",
        views.AccountView.as_view(),
        name="account",
    ),
    path(
        "code-info",
        views.CodeInfoView.as_view(),
        name="code-info",
    ),
]
