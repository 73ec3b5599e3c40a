class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data or configuration is invalid."""


class DataLoadError(DomainError):
    """Raised when a repository fails to load the data for a payroll run."""
