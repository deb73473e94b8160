"""
Serializers for App API endpoints.
"""

from rest_framework import serializers

from api.v1.admin.serializers import AccountSerializer

ACCOUNT_REGISTERED_MESSAGE = "Account registered"


class RedeemRequestSerializer(serializers.Serializer):
    """Serializer for activate (redeem) request."""

    code = serializers.CharField(required=True, max_length=64)


class RedeemResponseSerializer(serializers.Serializer):
    """Serializer for activate (redeem) response."""

    token = serializers.CharField()
    expiresAt = serializers.DateTimeField(source="expires_at")
    tokenExpiresAt = serializers.DateTimeField(source="token_expires_at")
    tokenExpiresIn = serializers.IntegerField(source="token_expires_in")


class RegisterAccountRequestSerializer(serializers.Serializer):
    """Serializer for register account request. Credentials are kept verbatim."""

    email = serializers.EmailField(required=True, max_length=255)
    emailPassword = serializers.CharField(required=True, max_length=255, trim_whitespace=False)
    servicePassword = serializers.CharField(
        required=True, max_length=255, trim_whitespace=False
    )
    accessToken = serializers.CharField(required=True, trim_whitespace=False)
    refreshToken = serializers.CharField(required=True, trim_whitespace=False)


class CodeInfoSerializer(serializers.Serializer):
    """Serializer for CodeInfoDTO."""

    code = serializers.CharField()
    expiresAt = serializers.DateTimeField(source="expires_at")
    maxAccounts = serializers.IntegerField(source="max_accounts")
    usedAccounts = serializers.IntegerField(source="used_accounts")
    status = serializers.CharField()


class AccountListResponseSerializer(serializers.Serializer):
    """Serializer for the caller's accounts, wrapped under "accounts"."""

    accounts = AccountSerializer(many=True)


class RegisterAccountResponseSerializer(serializers.Serializer):
    """Serializer for register account response."""

    message = serializers.CharField()
    account = AccountSerializer()
