"""
Domain exceptions.

Domain exceptions represent business rule violations
and domain-specific error conditions.
"""


class DomainException(Exception):
    """Base exception for all domain exceptions."""

    def __init__(self, message: str, code: str = None):
        """
        Initialize domain exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__


class ValidationError(DomainException):
    """Raised when input is malformed or out of range."""

    def __init__(self, message: str = "Invalid input"):
        super().__init__(message, code="VALIDATION_ERROR")


class NotFoundError(DomainException):
    """Raised when a requested entity does not exist."""

    def __init__(self, message: str = "Resource not found", code: str = "NOT_FOUND"):
        super().__init__(message, code=code)


class ActivationCodeNotFoundError(NotFoundError):
    """Raised when an activation code is absent or soft-deleted."""

    def __init__(self, message: str = "Activation code not found"):
        super().__init__(message, code="CODE_NOT_FOUND")


class ActivationCodeException(DomainException):
    """Base exception for activation code state errors."""

    pass


class InvalidCodeError(ActivationCodeException):
    """Raised when an activation code has been disabled by an administrator."""

    def __init__(self, message: str = "Activation code is disabled"):
        super().__init__(message, code="CODE_DISABLED")


class ExpiredCodeError(ActivationCodeException):
    """Raised when an activation code is past its expiry."""

    def __init__(self, message: str = "Activation code has expired"):
        super().__init__(message, code="CODE_EXPIRED")


class QuotaExceededError(ActivationCodeException):
    """Raised when an activation code has no account slots left."""

    def __init__(self, message: str = "Maximum number of accounts reached"):
        super().__init__(message, code="QUOTA_EXCEEDED")


class DuplicateCodeError(ActivationCodeException):
    """Raised when a generated code collides with an existing one."""

    def __init__(self, message: str = "Generated activation code already exists"):
        super().__init__(message, code="DUPLICATE_CODE")


class AuthenticationException(DomainException):
    """Base exception for authentication failures."""

    pass


class InvalidTokenError(AuthenticationException):
    """Raised when a token is malformed, forged, or from another signing domain."""

    def __init__(self, message: str = "Invalid token"):
        super().__init__(message, code="INVALID_TOKEN")


class ExpiredTokenError(AuthenticationException):
    """Raised when a token is past its embedded expiry."""

    def __init__(self, message: str = "Token has expired"):
        super().__init__(message, code="TOKEN_EXPIRED")


class InvalidCredentialsError(AuthenticationException):
    """Raised when an administrator login fails."""

    def __init__(self, message: str = "Invalid username or password"):
        super().__init__(message, code="INVALID_CREDENTIALS")


class PersistenceError(DomainException):
    """Raised when the store is unavailable or a transaction fails. Safe to retry."""

    def __init__(self, message: str = "Storage operation failed"):
        super().__init__(message, code="PERSISTENCE_ERROR")
