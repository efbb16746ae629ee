"""
Domain exceptions.

Every error raised by the domain and application layers derives from
``MarketplaceError`` so the API layer can translate it to an HTTP status
in one place.
"""

from typing import Any, Dict, Optional


class MarketplaceError(Exception):
    """Base exception class for all marketplace errors."""

    def __init__(self, message: str, error_code: str = None, details: Dict[str, Any] = None):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)


class EntityNotFoundError(MarketplaceError):
    """Raised when an entity id does not resolve to a record."""

    def __init__(self, entity: str, entity_id: Any = None, message: Optional[str] = None):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(message or f"{entity} not found", "NOT_FOUND", {"id": entity_id})


class InvalidTransitionError(MarketplaceError):
    """Raised when a lifecycle action is not allowed from the current status."""

    def __init__(self, entity: str, action: str, current_status: Any):
        self.entity = entity
        self.action = action
        self.current_status = getattr(current_status, "value", current_status)
        super().__init__(
            f"Cannot {action} {entity.lower()} with status '{self.current_status}'",
            "INVALID_TRANSITION",
            {"action": action, "status": self.current_status},
        )


class DomainValidationError(MarketplaceError):
    """Raised for invalid input or broken business preconditions."""

    def __init__(self, message: str = "Validation failed", error_code: str = "VALIDATION_ERROR", details: Dict[str, Any] = None):
        super().__init__(message, error_code, details)


class UserAlreadyExistsError(DomainValidationError):

    def __init__(self):
        super().__init__(
            "An account with this email already exists. Please sign in instead.",
            "USER_EXISTS",
        )


class AuthenticationError(MarketplaceError):
    """Raised for authentication failures."""

    def __init__(self, message: str = "Invalid credentials", error_code: str = "AUTH_ERROR", details: Dict[str, Any] = None):
        super().__init__(message, error_code, details)


class InvalidCredentialsError(AuthenticationError):

    def __init__(self):
        super().__init__("Invalid credentials", "INVALID_CREDENTIALS")


class EmailNotVerifiedError(AuthenticationError):

    def __init__(self, email: str):
        super().__init__(
            "Please verify your email address before signing in. Check your inbox for the verification link.",
            "EMAIL_NOT_VERIFIED",
            {"requires_verification": True, "email": email},
        )


class AccountPendingApprovalError(AuthenticationError):

    def __init__(self):
        super().__init__(
            "Your account is pending admin approval. You will be notified once approved.",
            "PENDING_APPROVAL",
            {"requires_approval": True},
        )


class PermissionDeniedError(MarketplaceError):
    """Raised when the caller may not act on the target entity."""

    def __init__(self, message: str = "Access denied", error_code: str = "FORBIDDEN", details: Dict[str, Any] = None):
        super().__init__(message, error_code, details)
