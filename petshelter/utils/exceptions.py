"""Custom exceptions for the application."""

from typing import Any, Dict, Optional


class BaseAppException(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, error_code: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)


class AuthenticationError(BaseAppException):
    """Raised when authentication fails."""

    def __init__(self, message: str = "Authentication failed", **kwargs):
        kwargs.setdefault("error_code", "AUTHENTICATION_FAILED")
        super().__init__(message, **kwargs)


class TokenExpiredError(AuthenticationError):
    """Raised when a token has expired."""

    def __init__(self, message: str = "Token has expired", **kwargs):
        super().__init__(message, error_code="TOKEN_EXPIRED", **kwargs)


class InvalidTokenError(AuthenticationError):
    """Raised when a token is invalid."""

    def __init__(self, message: str = "Invalid token", **kwargs):
        super().__init__(message, error_code="INVALID_TOKEN", **kwargs)


class AuthorizationError(BaseAppException):
    """Raised when authorization fails."""

    def __init__(self, message: str = "Access denied", **kwargs):
        kwargs.setdefault("error_code", "ACCESS_DENIED")
        super().__init__(message, **kwargs)


class PermissionDeniedError(AuthorizationError):
    """Raised when a permission check denies an action on a resource."""

    def __init__(self, resource: str, action: str, reason: Optional[str] = None):
        self.resource = resource
        self.action = action
        super().__init__(
            f"Permission denied for {action} on {resource}",
            error_code="PERMISSION_DENIED",
            details={"resource": resource, "action": action, "reason": reason},
        )


class ValidationError(BaseAppException):
    """Raised when validation fails."""

    def __init__(self, message: str = "Validation failed", field: Optional[str] = None, **kwargs):
        kwargs.setdefault("error_code", "VALIDATION_ERROR")
        if field:
            kwargs.setdefault("details", {"field": field})
        super().__init__(message, **kwargs)


class NotFoundError(BaseAppException):
    """Raised when a resource is not found."""

    def __init__(self, resource: str = "Resource", resource_id: Optional[str] = None, **kwargs):
        self.resource = resource
        self.resource_id = resource_id
        message = f"{resource} not found: {resource_id}" if resource_id else f"{resource} not found"
        kwargs.setdefault("error_code", "NOT_FOUND")
        kwargs.setdefault("details", {"resource": resource, "id": resource_id})
        super().__init__(message, **kwargs)


class ConflictError(BaseAppException):
    """Raised when there's a conflict (e.g., duplicate resource)."""

    def __init__(self, message: str = "Resource conflict", **kwargs):
        kwargs.setdefault("error_code", "CONFLICT")
        super().__init__(message, **kwargs)


class EmailAlreadyExistsError(ConflictError):
    """Raised when email already exists."""

    def __init__(self, message: str = "Email already exists", **kwargs):
        super().__init__(message, error_code="EMAIL_EXISTS", **kwargs)


class InfrastructureError(BaseAppException):
    """Raised when a backing service is unavailable or misbehaves."""

    def __init__(self, message: str = "Infrastructure failure", **kwargs):
        kwargs.setdefault("error_code", "INFRASTRUCTURE_ERROR")
        super().__init__(message, **kwargs)


class DatabaseError(InfrastructureError):
    """Raised when a database operation fails."""

    def __init__(self, operation: str, cause: Optional[BaseException] = None):
        self.operation = operation
        self.cause = cause
        reason = str(cause) if cause is not None else "unknown error"
        super().__init__(
            f"DB {operation} failed: {reason}",
            error_code="DATABASE_ERROR",
            details={"operation": operation},
        )


class ConfigurationError(BaseAppException):
    """Raised when the permission configuration is incomplete or inconsistent.

    Never user-caused. Permission checks treat it as a deny.
    """

    def __init__(self, message: str = "Invalid permission configuration", **kwargs):
        kwargs.setdefault("error_code", "CONFIGURATION_ERROR")
        super().__init__(message, **kwargs)


class PredicateEvaluationError(BaseAppException):
    """Raised when a dynamic permission rule fails while being evaluated."""

    def __init__(self, resource: str, action: str, cause: BaseException):
        self.resource = resource
        self.action = action
        self.cause = cause
        super().__init__(
            f"Rule for {action} on {resource} raised {type(cause).__name__}: {cause}",
            error_code="PREDICATE_EVALUATION_ERROR",
            details={"resource": resource, "action": action},
        )
