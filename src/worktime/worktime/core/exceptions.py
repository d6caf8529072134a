class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class RepositoryError(DomainError):
    """Raised when a read from the persistence layer fails."""


class MalformedSequenceError(DomainError):
    """Raised by strict aggregation policies when a clock sequence is inconsistent."""
