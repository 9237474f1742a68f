"""Domain errors."""


class NotFoundError(LookupError):
    """Raised when a requested entry or cycle does not exist for the user."""
