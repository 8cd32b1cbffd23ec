"""Domain errors raised by services and adapters."""


class CatlogError(Exception):
    """Base error carrying a short user-facing message."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidArgumentError(CatlogError):
    """Raised when input is missing or out of range."""


class NotFoundError(CatlogError):
    """Raised when an id does not resolve to a stored row."""


class ConflictError(CatlogError):
    """Raised when a row cannot be removed because it is still referenced."""


class StorageError(CatlogError):
    """Raised when the backing store rejects or fails a query."""
