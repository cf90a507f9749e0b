"""Custom domain exceptions for the application."""

# Stable, machine-readable error codes for API consumers.
NOT_FOUND = "NOT_FOUND"
CONFLICT = "CONFLICT"
VALIDATION_ERROR = "VALIDATION_ERROR"
UNAUTHORIZED = "UNAUTHORIZED"


class DomainError(Exception):
    """Base exception for domain/business logic errors."""

    code: str = "DOMAIN_ERROR"


class NotFoundError(DomainError):
    """Raised when a requested insurance policy does not exist."""

    code = NOT_FOUND


class ConflictError(DomainError):
    """Raised when an operation would violate a monotonic invariant (e.g. filing a claim twice)."""

    code = CONFLICT


class DomainValidationError(DomainError):
    """Raised when input is malformed or incomplete (e.g. missing required fields, empty IDs)."""

    code = VALIDATION_ERROR


class UnauthorizedError(DomainError):
    """Raised when the caller principal cannot be resolved from the request."""

    code = UNAUTHORIZED
