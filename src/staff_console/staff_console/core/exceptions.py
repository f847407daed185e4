class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class PolicyError(DomainError):
    """Raised when a valid request is refused by a business policy."""


class MonthLockedError(PolicyError):
    """Raised when a payroll mutation targets a locked month."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""
