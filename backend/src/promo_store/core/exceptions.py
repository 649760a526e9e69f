"""Errors raised by the campaign and participant stores."""


class StoreError(Exception):
    """Base class for store errors."""


class NotFoundError(StoreError):
    """Raised when a requested row does not exist."""

    def __init__(self, entity: str, identifier: object):
        self.entity = entity
        self.identifier = identifier
        super().__init__(f"{entity} {identifier!r} not found")


class StorageError(StoreError):
    """Raised for any other failure reported by the database engine."""


class ConflictError(StorageError):
    """Raised when a write violates a uniqueness or primary key constraint."""
