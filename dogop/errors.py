"""Custom domain exceptions for the application."""

# Stable problem titles for API consumers.
INVALID_REQUEST = "invalid request"
INVALID_REQUEST_BODY = "invalid request body"
OFFER_NOT_FOUND = "offer not found"
STORAGE_ERROR = "storage error"
INTERNAL_ERROR = "internal server error"


class DomainError(Exception):
    """Base exception for domain/business logic errors."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource does not exist."""

    pass


class DomainValidationError(DomainError):
    """Raised when client input is well-formed JSON but not a valid value (e.g. a malformed identifier)."""

    pass


class StorageError(DomainError):
    """Raised when the database cannot complete a read or write.

    The message is meant for API consumers and must not carry credentials or raw driver output.
    """

    pass
