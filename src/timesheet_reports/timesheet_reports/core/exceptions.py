class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class StructuralError(DomainError):
    """Raised when a source has no usable shape (empty sheet, missing header)."""
