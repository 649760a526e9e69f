"""Base model with common timestamp fields."""

import time

from sqlalchemy import BigInteger
from sqlalchemy.orm import Mapped, mapped_column


def epoch_now() -> int:
    """Current time in whole seconds since the epoch."""
    return int(time.time())


class TimestampMixin:
    """Mixin that adds created_at and updated_at epoch-second columns."""

    created_at: Mapped[int] = mapped_column(
        BigInteger,
        nullable=False,
        default=epoch_now,
    )
    updated_at: Mapped[int] = mapped_column(
        BigInteger,
        nullable=False,
        default=epoch_now,
        onupdate=epoch_now,
    )
