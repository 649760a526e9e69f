"""Shared plumbing for the stores: session factory, logger, error mapping."""

import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from promo_store.core.exceptions import ConflictError, StorageError


class BaseStore:
    """Base class for stores backed by an async session factory.

    Every operation opens its own session, so a store instance can be shared
    by concurrent callers. asyncio.CancelledError is not an SQLAlchemyError
    and passes through the operations untouched.
    """

    label = "record"

    def __init__(
        self,
        session_maker: async_sessionmaker[AsyncSession],
        logger: logging.Logger | None = None,
    ):
        self.session_maker = session_maker
        self.logger = logger or logging.getLogger(type(self).__module__)

    def _storage_error(self, action: str, exc: SQLAlchemyError) -> StorageError:
        """Log a failed operation and build the error to raise in its place."""
        self.logger.error(f"Failed to {action} {self.label}: {exc}")
        if isinstance(exc, IntegrityError):
            return ConflictError(f"Cannot {action} {self.label}: constraint violated")
        return StorageError(f"Cannot {action} {self.label}")
