class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when a required field is missing or a value is not allowed."""


class NotFoundError(DomainError):
    """Raised when a referenced teacher or student does not exist."""


class StorageError(DomainError):
    """Raised when the persisted dataset cannot be read or written."""
