"""
Custom exceptions for the persistence layer.

These exceptions let callers tell an unreachable backing store apart from a
corrupt record. Lost optimistic races and stale writes are NOT errors and
never surface as exceptions.
"""


class StoreError(Exception):
    """
    Base exception for all store errors.
    
    All store-specific exceptions inherit from this to allow catching
    any persistence failure with a single except clause.
    """
    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}
    
    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class StoreUnavailableError(StoreError):
    """
    Raised when the backing store cannot serve a request.
    
    Includes connection refusals, timeouts, authentication failures and
    protocol errors. The original redis-py exception is chained as
    ``__cause__``. Never retried automatically.
    """
    pass


class StoreDeserializationError(StoreError):
    """
    Raised when a stored record cannot be decoded.
    
    The store does not attempt partial recovery of a malformed record.
    """
    pass
