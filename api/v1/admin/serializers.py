"""
Serializers for Admin API endpoints.
"""

from rest_framework import serializers

from activation_codes.domain.activation_code import MAX_ACCOUNTS_LIMIT, MAX_DURATION_DAYS


class LoginRequestSerializer(serializers.Serializer):
    """Serializer for administrator login request."""

    username = serializers.CharField(required=True, max_length=150)
    password = serializers.CharField(required=True, max_length=128, trim_whitespace=False)


class LoginResponseSerializer(serializers.Serializer):
    """Serializer for administrator login response."""

    token = serializers.CharField()
    expiresAt = serializers.DateTimeField(source="expires_at")
    expiresIn = serializers.IntegerField(source="expires_in")


class CreateActivationCodeRequestSerializer(serializers.Serializer):
    """Serializer for create activation code request."""

    duration = serializers.IntegerField(
        required=True, min_value=1, max_value=MAX_DURATION_DAYS, help_text="Validity in days"
    )
    maxAccounts = serializers.IntegerField(
        required=True, min_value=1, max_value=MAX_ACCOUNTS_LIMIT
    )


class UpdateCodeStatusRequestSerializer(serializers.Serializer):
    """Serializer for update status request."""

    status = serializers.ChoiceField(choices=["enabled", "disabled"], required=True)


class AccountSerializer(serializers.Serializer):
    """Serializer for AccountDTO (shared with app API)."""

    id = serializers.IntegerField()
    activationCodeId = serializers.IntegerField(source="activation_code_id")
    email = serializers.CharField()
    emailPassword = serializers.CharField(source="email_password")
    servicePassword = serializers.CharField(source="service_password")
    accessToken = serializers.CharField(source="access_token")
    refreshToken = serializers.CharField(source="refresh_token")
    createdAt = serializers.DateTimeField(source="created_at")


class ActivationCodeSerializer(serializers.Serializer):
    """Serializer for ActivationCodeDTO."""

    id = serializers.IntegerField()
    code = serializers.CharField()
    expiresAt = serializers.DateTimeField(source="expires_at")
    maxAccounts = serializers.IntegerField(source="max_accounts")
    usedAccounts = serializers.IntegerField(source="used_accounts")
    status = serializers.CharField()
    createdAt = serializers.DateTimeField(source="created_at")
    updatedAt = serializers.DateTimeField(source="updated_at")
    accounts = AccountSerializer(many=True)


class ActivationCodePageSerializer(serializers.Serializer):
    """Serializer for ActivationCodePageDTO."""

    items = ActivationCodeSerializer(many=True)
    total = serializers.IntegerField()
    page = serializers.IntegerField()
    pageSize = serializers.IntegerField(source="page_size")
    totalPages = serializers.IntegerField(source="total_pages")


class UpdateCodeStatusResponseSerializer(serializers.Serializer):
    """Serializer for update status response."""

    id = serializers.IntegerField()
    status = serializers.CharField()
    message = serializers.CharField()
