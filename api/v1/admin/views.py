"""
Admin API views.

These endpoints are used by administrators to:
- Log in
- Create and list activation codes
- Inspect a code with its accounts
- Enable or disable codes
"""

import logging

from asgiref.sync import async_to_sync
from django.conf import settings
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from activation_codes.application.commands.create_activation_code import (
    CreateActivationCodeCommand,
)
from activation_codes.application.commands.update_code_status import UpdateCodeStatusCommand
from activation_codes.application.handlers.admin_query_handlers import (
    GetActivationCodeHandler,
    ListActivationCodesHandler,
)
from activation_codes.application.handlers.create_activation_code_handler import (
    CreateActivationCodeHandler,
)
from activation_codes.application.handlers.update_code_status_handler import (
    UpdateCodeStatusHandler,
)
from activation_codes.application.queries.get_activation_code import GetActivationCodeQuery
from activation_codes.application.queries.list_activation_codes import ListActivationCodesQuery
from activation_codes.infrastructure.repositories.django_activation_code_repository import (
    DjangoActivationCodeRepository,
)
from administrators.application.commands.login_administrator import LoginAdministratorCommand
from administrators.application.handlers.login_administrator_handler import (
    LoginAdministratorHandler,
)
from administrators.infrastructure.repositories.django_administrator_repository import (
    DjangoAdministratorRepository,
)
from api.exceptions import validation_error_response
from api.v1.admin.serializers import (
    ActivationCodePageSerializer,
    ActivationCodeSerializer,
    CreateActivationCodeRequestSerializer,
    LoginRequestSerializer,
    LoginResponseSerializer,
    UpdateCodeStatusRequestSerializer,
    UpdateCodeStatusResponseSerializer,
)
from core.domain.exceptions import DuplicateCodeError
from core.domain.value_objects import DEFAULT_PAGE_SIZE
from core.instrumentation import Status, StatusCode, get_tracer
from core.security.tokens import build_token_service

logger = logging.getLogger(__name__)

# Initialize repositories (in production, use DI container)
_activation_code_repo = DjangoActivationCodeRepository()
_administrator_repo = DjangoAdministratorRepository()

tracer = get_tracer(__name__)

ADMIN_AUTH_PARAMETER = OpenApiParameter(
    name="Authorization",
    type=str,
    location=OpenApiParameter.HEADER,
    required=True,
    description="Bearer admin token obtained from the login endpoint",
)


def _int_param(value, default: int) -> int:
    """Parse a query parameter, falling back to default when it is not an integer."""
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


class LoginView(APIView):
    """View for administrator login."""

    @extend_schema(
        operation_id="admin_login",
        summary="Administrator Login",
        description="Exchange administrator credentials for an admin token.",
        tags=["Admin API"],
        request=LoginRequestSerializer,
        responses={
            200: LoginResponseSerializer,
            400: {"description": "Bad Request"},
            401: {"description": "Invalid username or password"},
        },
    )
    def post(self, request: Request) -> Response:
        """Log an administrator in."""
        return async_to_sync(self._handle_login)(request)

    async def _handle_login(self, request: Request) -> Response:
        """Async handler for login."""
        with tracer.start_as_current_span("admin_login") as span:
            span.set_attribute("operation", "admin_login")

            serializer = LoginRequestSerializer(data=request.data)
            if not serializer.is_valid():
                span.set_attribute("error", "validation_failed")
                span.set_status(Status(StatusCode.ERROR, "Validation failed"))
                return validation_error_response(serializer.errors)

            handler = LoginAdministratorHandler(
                administrator_repository=_administrator_repo,
                token_service=build_token_service(),
            )
            command = LoginAdministratorCommand(
                username=serializer.validated_data["username"],
                password=serializer.validated_data["password"],
            )

            result = await handler.handle(command)

            span.set_status(Status(StatusCode.OK))
            return Response(LoginResponseSerializer(result).data, status=status.HTTP_200_OK)


class ActivationCodeListView(APIView):
    """View for creating and listing activation codes."""

    @extend_schema(
        operation_id="create_activation_code",
        summary="Create Activation Code",
        description=(
            "Create an enabled activation code valid for `duration` days "
            "that accepts up to `maxAccounts` accounts."
        ),
        tags=["Admin API"],
        parameters=[ADMIN_AUTH_PARAMETER],
        request=CreateActivationCodeRequestSerializer,
        responses={
            200: ActivationCodeSerializer,
            400: {"description": "Bad Request"},
            401: {"description": "Missing, invalid or expired admin token"},
            500: {"description": "Code generation failed"},
            503: {"description": "Storage unavailable"},
        },
    )
    def post(self, request: Request) -> Response:
        """Create an activation code."""
        return async_to_sync(self._handle_create)(request)

    async def _handle_create(self, request: Request) -> Response:
        """Async handler for create activation code."""
        with tracer.start_as_current_span("create_activation_code") as span:
            span.set_attribute("operation", "create_activation_code")
            span.set_attribute("admin.id", getattr(request, "admin_id", 0) or 0)

            serializer = CreateActivationCodeRequestSerializer(data=request.data)
            if not serializer.is_valid():
                span.set_attribute("error", "validation_failed")
                span.set_status(Status(StatusCode.ERROR, "Validation failed"))
                return validation_error_response(serializer.errors)

            handler = CreateActivationCodeHandler(
                activation_code_repository=_activation_code_repo,
                code_length=settings.ACTIVATION_CODE_LENGTH,
            )
            command = CreateActivationCodeCommand(
                duration_days=serializer.validated_data["duration"],
                max_accounts=serializer.validated_data["maxAccounts"],
            )

            attempts = max(1, settings.ACTIVATION_CODE_GENERATION_ATTEMPTS)
            for attempt in range(1, attempts + 1):
                try:
                    result = await handler.handle(command)
                    break
                except DuplicateCodeError:
                    logger.warning(
                        "Generated activation code collided (attempt %d/%d)", attempt, attempts
                    )
                    if attempt == attempts:
                        span.set_status(Status(StatusCode.ERROR, "Code generation failed"))
                        raise

            span.set_attribute("activation_code.id", result.id)
            span.set_status(Status(StatusCode.OK))
            return Response(ActivationCodeSerializer(result).data, status=status.HTTP_200_OK)

    @extend_schema(
        operation_id="list_activation_codes",
        summary="List Activation Codes",
        description=(
            "List activation codes, newest first. Page numbers below 1 are treated "
            "as 1; page sizes below 1 fall back to 10 and are capped at the "
            "configured maximum."
        ),
        tags=["Admin API"],
        parameters=[
            ADMIN_AUTH_PARAMETER,
            OpenApiParameter(
                name="page",
                type=int,
                location=OpenApiParameter.QUERY,
                required=False,
                description="Page number (default 1)",
            ),
            OpenApiParameter(
                name="pageSize",
                type=int,
                location=OpenApiParameter.QUERY,
                required=False,
                description="Items per page (default 10)",
            ),
        ],
        responses={
            200: ActivationCodePageSerializer,
            401: {"description": "Missing, invalid or expired admin token"},
        },
    )
    def get(self, request: Request) -> Response:
        """List activation codes."""
        return async_to_sync(self._handle_list)(request)

    async def _handle_list(self, request: Request) -> Response:
        """Async handler for list activation codes."""
        with tracer.start_as_current_span("list_activation_codes") as span:
            span.set_attribute("operation", "list_activation_codes")

            query = ListActivationCodesQuery(
                page=_int_param(request.query_params.get("page"), 1),
                page_size=_int_param(request.query_params.get("pageSize"), DEFAULT_PAGE_SIZE),
            )
            handler = ListActivationCodesHandler(
                activation_code_repository=_activation_code_repo,
                max_page_size=settings.ACTIVATION_CODE_MAX_PAGE_SIZE,
            )

            result = await handler.handle(query)

            span.set_attribute("page", result.page)
            span.set_attribute("total", result.total)
            span.set_status(Status(StatusCode.OK))
            return Response(ActivationCodePageSerializer(result).data, status=status.HTTP_200_OK)


class ActivationCodeDetailView(APIView):
    """View for inspecting one activation code."""

    @extend_schema(
        operation_id="get_activation_code",
        summary="Get Activation Code",
        description="Get an activation code with its registered accounts, whatever its status.",
        tags=["Admin API"],
        parameters=[ADMIN_AUTH_PARAMETER],
        responses={
            200: ActivationCodeSerializer,
            401: {"description": "Missing, invalid or expired admin token"},
            404: {"description": "Activation code not found"},
        },
    )
    def get(self, request: Request, code_id: int) -> Response:
        """Get an activation code."""
        return async_to_sync(self._handle_get)(request, code_id)

    async def _handle_get(self, request: Request, code_id: int) -> Response:
        """Async handler for get activation code."""
        with tracer.start_as_current_span("get_activation_code") as span:
            span.set_attribute("operation", "get_activation_code")
            span.set_attribute("activation_code.id", code_id)

            handler = GetActivationCodeHandler(activation_code_repository=_activation_code_repo)
            result = await handler.handle(GetActivationCodeQuery(code_id=code_id))

            span.set_status(Status(StatusCode.OK))
            return Response(ActivationCodeSerializer(result).data, status=status.HTTP_200_OK)


class ActivationCodeStatusView(APIView):
    """View for enabling and disabling activation codes."""

    @extend_schema(
        operation_id="update_activation_code_status",
        summary="Update Activation Code Status",
        description=(
            "Set a code to `enabled` or `disabled`. Setting the current status "
            "again succeeds without change."
        ),
        tags=["Admin API"],
        parameters=[ADMIN_AUTH_PARAMETER],
        request=UpdateCodeStatusRequestSerializer,
        responses={
            200: UpdateCodeStatusResponseSerializer,
            400: {"description": "Bad Request"},
            401: {"description": "Missing, invalid or expired admin token"},
            404: {"description": "Activation code not found"},
        },
    )
    def put(self, request: Request, code_id: int) -> Response:
        """Update activation code status."""
        return async_to_sync(self._handle_update_status)(request, code_id)

    async def _handle_update_status(self, request: Request, code_id: int) -> Response:
        """Async handler for update status."""
        with tracer.start_as_current_span("update_activation_code_status") as span:
            span.set_attribute("operation", "update_activation_code_status")
            span.set_attribute("activation_code.id", code_id)

            serializer = UpdateCodeStatusRequestSerializer(data=request.data)
            if not serializer.is_valid():
                span.set_attribute("error", "validation_failed")
                span.set_status(Status(StatusCode.ERROR, "Validation failed"))
                return validation_error_response(serializer.errors)

            handler = UpdateCodeStatusHandler(activation_code_repository=_activation_code_repo)
            command = UpdateCodeStatusCommand(
                code_id=code_id,
                status=serializer.validated_data["status"],
            )

            result = await handler.handle(command)

            span.set_attribute("status", result.status)
            span.set_status(Status(StatusCode.OK))
            return Response(
                UpdateCodeStatusResponseSerializer(result).data, status=status.HTTP_200_OK
            )
