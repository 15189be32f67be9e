class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is missing or malformed."""


class NotFoundError(DomainError):
    """Raised when a referenced document does not exist."""


class StoreError(DomainError):
    """Raised when the document store or object store call fails."""
