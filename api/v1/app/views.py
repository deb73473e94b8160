"""
App API views.

These endpoints are used by the end-user application to:
- Redeem an activation code for an app token
- Register accounts under the code
- Read the code's accounts and usage
"""

from asgiref.sync import async_to_sync
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from activation_codes.application.commands.redeem_activation_code import (
    RedeemActivationCodeCommand,
)
from activation_codes.application.commands.register_account import RegisterAccountCommand
from activation_codes.application.handlers.app_query_handlers import (
    GetCodeAccountsHandler,
    GetCodeInfoHandler,
)
from activation_codes.application.handlers.redeem_activation_code_handler import (
    RedeemActivationCodeHandler,
)
from activation_codes.application.handlers.register_account_handler import (
    RegisterAccountHandler,
)
from activation_codes.application.queries.get_code_accounts import GetCodeAccountsQuery
from activation_codes.application.queries.get_code_info import GetCodeInfoQuery
from activation_codes.infrastructure.repositories.django_activation_code_repository import (
    DjangoActivationCodeRepository,
)
from api.exceptions import validation_error_response
from api.v1.app.serializers import (
    ACCOUNT_REGISTERED_MESSAGE,
    AccountListResponseSerializer,
    CodeInfoSerializer,
    RedeemRequestSerializer,
    RedeemResponseSerializer,
    RegisterAccountRequestSerializer,
    RegisterAccountResponseSerializer,
)
from core.instrumentation import Status, StatusCode, get_tracer
from core.security.tokens import build_token_service

# Initialize repositories (in production, use DI container)
_activation_code_repo = DjangoActivationCodeRepository()

tracer = get_tracer(__name__)

APP_AUTH_PARAMETER = OpenApiParameter(
    name="Authorization",
    type=str,
    location=OpenApiParameter.HEADER,
    required=True,
    description="Bearer app token obtained from the activate endpoint",
)

CODE_STATE_RESPONSES = {
    401: {"description": "Missing, invalid or expired app token"},
    403: {"description": "Activation code disabled or expired"},
    404: {"description": "Activation code not found"},
}


class RedeemView(APIView):
    """View for redeeming activation codes."""

    @extend_schema(
        operation_id="activate",
        summary="Redeem Activation Code",
        description=(
            "Exchange a valid activation code for an app token. The response also "
            "carries the code's own expiry. Redeeming does not consume quota."
        ),
        tags=["App API"],
        request=RedeemRequestSerializer,
        responses={
            200: RedeemResponseSerializer,
            400: {"description": "Bad Request"},
            403: {"description": "Activation code disabled or expired"},
            404: {"description": "Activation code not found"},
        },
    )
    def post(self, request: Request) -> Response:
        """Redeem an activation code."""
        return async_to_sync(self._handle_redeem)(request)

    async def _handle_redeem(self, request: Request) -> Response:
        """Async handler for redeem."""
        with tracer.start_as_current_span("redeem_activation_code") as span:
            span.set_attribute("operation", "redeem_activation_code")

            serializer = RedeemRequestSerializer(data=request.data)
            if not serializer.is_valid():
                span.set_attribute("error", "validation_failed")
                span.set_status(Status(StatusCode.ERROR, "Validation failed"))
                return validation_error_response(serializer.errors)

            handler = RedeemActivationCodeHandler(
                activation_code_repository=_activation_code_repo,
                token_service=build_token_service(),
            )
            command = RedeemActivationCodeCommand(code=serializer.validated_data["code"])

            result = await handler.handle(command)

            span.set_status(Status(StatusCode.OK))
            return Response(RedeemResponseSerializer(result).data, status=status.HTTP_200_OK)


class AccountView(APIView):
    """View for registering and listing accounts under the caller's code."""

    @extend_schema(
        operation_id="list_accounts",
        summary="List Accounts",
        description="List accounts registered under the caller's code, oldest first.",
        tags=["App API"],
        parameters=[APP_AUTH_PARAMETER],
        responses={200: AccountListResponseSerializer, **CODE_STATE_RESPONSES},
    )
    def get(self, request: Request) -> Response:
        """List accounts for the caller's code."""
        return async_to_sync(self._handle_list_accounts)(request)

    async def _handle_list_accounts(self, request: Request) -> Response:
        """Async handler for list accounts."""
        with tracer.start_as_current_span("list_accounts") as span:
            span.set_attribute("operation", "list_accounts")
            span.set_attribute("activation_code.id", request.code_id)

            handler = GetCodeAccountsHandler(activation_code_repository=_activation_code_repo)
            result = await handler.handle(GetCodeAccountsQuery(code_id=request.code_id))

            span.set_attribute("accounts.count", len(result))
            span.set_status(Status(StatusCode.OK))
            body = AccountListResponseSerializer({"accounts": result}).data
            return Response(body, status=status.HTTP_200_OK)

    @extend_schema(
        operation_id="register_account",
        summary="Register Account",
        description=(
            "Register an account under the caller's code. Fails with 409 once "
            "the code's account quota is used up."
        ),
        tags=["App API"],
        parameters=[APP_AUTH_PARAMETER],
        request=RegisterAccountRequestSerializer,
        responses={
            201: RegisterAccountResponseSerializer,
            400: {"description": "Bad Request"},
            409: {"description": "Account quota reached"},
            503: {"description": "Storage unavailable"},
            **CODE_STATE_RESPONSES,
        },
    )
    def post(self, request: Request) -> Response:
        """Register an account."""
        return async_to_sync(self._handle_register_account)(request)

    async def _handle_register_account(self, request: Request) -> Response:
        """Async handler for register account."""
        with tracer.start_as_current_span("register_account") as span:
            span.set_attribute("operation", "register_account")
            span.set_attribute("activation_code.id", request.code_id)

            serializer = RegisterAccountRequestSerializer(data=request.data)
            if not serializer.is_valid():
                span.set_attribute("error", "validation_failed")
                span.set_status(Status(StatusCode.ERROR, "Validation failed"))
                return validation_error_response(serializer.errors)

            data = serializer.validated_data
            handler = RegisterAccountHandler(activation_code_repository=_activation_code_repo)
            command = RegisterAccountCommand(
                code_id=request.code_id,
                email=data["email"],
                email_password=data["emailPassword"],
                service_password=data["servicePassword"],
                access_token=data["accessToken"],
                refresh_token=data["refreshToken"],
            )

            result = await handler.handle(command)

            span.set_attribute("account.id", result.id)
            span.set_status(Status(StatusCode.OK))
            body = RegisterAccountResponseSerializer(
                {"message": ACCOUNT_REGISTERED_MESSAGE, "account": result}
            ).data
            return Response(body, status=status.HTTP_201_CREATED)


class CodeInfoView(APIView):
    """View for the caller's code usage."""

    @extend_schema(
        operation_id="code_info",
        summary="Get Code Info",
        description="Get expiry, quota and usage of the caller's code.",
        tags=["App API"],
        parameters=[APP_AUTH_PARAMETER],
        responses={200: CodeInfoSerializer, **CODE_STATE_RESPONSES},
    )
    def get(self, request: Request) -> Response:
        """Get code info."""
        return async_to_sync(self._handle_code_info)(request)

    async def _handle_code_info(self, request: Request) -> Response:
        """Async handler for code info."""
        with tracer.start_as_current_span("code_info") as span:
            span.set_attribute("operation", "code_info")
            span.set_attribute("activation_code.id", request.code_id)

            handler = GetCodeInfoHandler(activation_code_repository=_activation_code_repo)
            result = await handler.handle(GetCodeInfoQuery(code_id=request.code_id))

            span.set_status(Status(StatusCode.OK))
            return Response(CodeInfoSerializer(result).data, status=status.HTTP_200_OK)
