"""
URL configuration for admin API endpoints.
"""

from django.urls import path

from api.v1.admin import views

app_name = "admin_api"

urlpatterns = [
    path(
        "login",
        views.LoginView.as_view(),
        name="login",
    ),
    path(
        "activation-codes",
        views.ActivationCodeListView.as_view(),
        name="activation-codes",
    ),
    path(
        "activation-codes/<int:code_id>",
        views.ActivationCodeDetailView.as_view(),
        name="activation-code-detail",
    ),
    path(
        "activation-codes/<int:code_id>/status",
        views.ActivationCodeStatusView.as_view(),
        name="activation-code-status",
    ),
]
