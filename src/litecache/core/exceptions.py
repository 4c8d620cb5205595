"""
Custom exceptions for litecache.
"""


class LiteCacheError(Exception):
    """Base exception for all litecache errors."""

    def __init__(self, message: str, details: str | None = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class CacheError(LiteCacheError):
    """Raised when a storage operation fails."""

    def __init__(self, operation: str, details: str | None = None):
        super().__init__(f"Cache error during {operation}", details=details)
        self.operation = operation


class StoreOpenError(CacheError):
    """Raised when the backing database cannot be opened or initialized."""

    def __init__(self, path: str, details: str | None = None):
        super().__init__("open", details=details)
        self.message = f"Could not open cache store at {path}"
        self.path = path
