"""
URL configuration for authentication app.

URL structure (mounted under /api/v1/):
    auth/register/     - Account creation (POST, public)
    auth/login/        - Email/password login returning a token (POST, public)
    search/users/      - User search by name (GET, token required)
"""

from django.urls import path

from authentication.views import LoginView, RegisterView, UserSearchView

app_name = "authentication"

urlpatterns = [
    path("auth/register/", RegisterView.as_view(), name="register"),
    path("auth/login/", LoginView.as_view(), name="login"),
    path("search/users/", UserSearchView.as_view(), name="user-search"),
]
