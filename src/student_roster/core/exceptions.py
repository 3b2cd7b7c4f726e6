class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class StorageError(DomainError):
    """Raised when a storage slot cannot be read or written."""


class EditSessionError(DomainError):
    """Raised when an edit action does not fit the current modal state."""
