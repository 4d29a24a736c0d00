"""
Authentication views.

This module provides API views for:
- Registration (public)
- Login returning a bearer token (public)
- User search by name (token required)

Related files:
    - serializers.py: Request/response serialization
    - services.py: Business logic (AccountService, UserService)
    - urls.py: URL routing

Response bodies:
    Success: {"message": ...} / {"token": ...} / {"users": [...]}
    Failure: {"errors": [{"message": ..., "field": ...}]} or {"message": ...}
"""

from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from authentication.constants import RegisterAPIMessage
from authentication.serializers import (
    LoginSerializer,
    RegisterSerializer,
    TokenSerializer,
    UserSearchQuerySerializer,
    UserSummarySerializer,
)
from authentication.services import AccountService, UserService
from core.responses import error_response, form_errors, generic_response

# Error codes that map to 400; anything else from a service is a 500
CLIENT_ERROR_CODES = frozenset({"EMAIL_IN_USE", "INVALID_EMAIL", "INVALID_CREDENTIALS"})


def _failure_response(result):
    """Render a failed ServiceResult as an {"errors": [...]} response."""
    if result.error_code in CLIENT_ERROR_CODES:
        return Response(
            error_response(result.errors or [{"message": result.error}]),
            status=status.HTTP_400_BAD_REQUEST,
        )
    return Response(
        error_response([generic_response(result.error)]),
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


class RegisterView(APIView):
    """
    API view for account creation.

    POST: Create an account

    URL: /api/v1/auth/register/
    """

    authentication_classes = []
    permission_classes = [AllowAny]

    @extend_schema(
        operation_id="auth_register",
        summary="Register",
        description="Create an account. Emails are unique and case-insensitive.",
        tags=["Auth"],
        request=RegisterSerializer,
        responses={
            201: OpenApiResponse(description="Account created"),
            400: OpenApiResponse(description="Form errors or email in use"),
            500: OpenApiResponse(description="Account could not be created"),
        },
    )
    def post(self, request):
        """
        Register a new user.

        Request body:
            {
                "name": "Ada Lovelace",
                "email": "ada@example.com",
                "password": "secret"
            }

        Returns:
            {"message": "Account successfully created."}
        """
        serializer = RegisterSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(
                error_response(form_errors(serializer.errors)),
                status=status.HTTP_400_BAD_REQUEST,
            )

        result = AccountService.register(**serializer.validated_data)
        if not result.success:
            return _failure_response(result)

        return Response(
            generic_response(RegisterAPIMessage.REGISTER_SUCCEEDED),
            status=status.HTTP_201_CREATED,
        )


class LoginView(APIView):
    """
    API view for logging in.

    POST: Exchange email and password for a bearer token

    URL: /api/v1/auth/login/
    """

    authentication_classes = []
    permission_classes = [AllowAny]

    @extend_schema(
        operation_id="auth_login",
        summary="Log in",
        description="Authenticate with email and password to receive a bearer token.",
        tags=["Auth"],
        request=LoginSerializer,
        responses={
            200: TokenSerializer,
            400: OpenApiResponse(description="Form errors, unknown email or bad credentials"),
            500: OpenApiResponse(description="Login could not be processed"),
        },
    )
    def post(self, request):
        """
        Log a user in.

        Request body:
            {
                "email": "ada@example.com",
                "password": "secret"
            }

        Returns:
            {"token": "<bearer token>"}
        """
        serializer = LoginSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(
                error_response(form_errors(serializer.errors)),
                status=status.HTTP_400_BAD_REQUEST,
            )

        result = AccountService.login(**serializer.validated_data)
        if not result.success:
            return _failure_response(result)

        return Response(TokenSerializer({"token": result.data}).data)


class UserSearchView(APIView):
    """
    API view for finding users to add to a chat.

    GET: Search users by name (case-insensitive substring)

    URL: /api/v1/search/users/?name=<text>
    """

    @extend_schema(
        operation_id="search_users",
        summary="Search users",
        tags=["Chat - Search"],
        parameters=[
            OpenApiParameter(
                "name", str, OpenApiParameter.QUERY, required=True, description="Text to match"
            )
        ],
        responses={200: UserSummarySerializer(many=True)},
    )
    def get(self, request):
        """
        Search users by name.

        Returns:
            {"users": [{"id": 1, "name": "Ada Lovelace"}, ...]}
        """
        query = UserSearchQuerySerializer(data=request.query_params)
        if not query.is_valid():
            return Response(
                error_response(form_errors(query.errors)),
                status=status.HTTP_400_BAD_REQUEST,
            )

        result = UserService.search_by_name(request.auth, query.validated_data["name"])
        if not result.success:
            return Response(
                generic_response(result.error),
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

        return Response({"users": UserSummarySerializer(result.data, many=True).data})
