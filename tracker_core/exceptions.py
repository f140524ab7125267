"""Domain-specific exceptions for the finance tracker core."""

class ValidationError(ValueError):
    """Raised when user-supplied data does not meet validation requirements."""


class RecordNotFoundError(LookupError):
    """Raised when an expense or income entry cannot be located."""
