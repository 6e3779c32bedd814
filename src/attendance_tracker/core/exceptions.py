class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a subject position does not exist in the current list."""


class CorruptStateError(DomainError):
    """Raised when persisted data exists but cannot be parsed.

    Never handled by resetting the store: existing data would be lost.
    """
