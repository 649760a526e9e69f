"""Participant model for the shared participation ledger."""

import enum

from sqlalchemy import BigInteger, Index, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from promo_store.core.database import Base


class CampaignKind(str, enum.Enum):
    """Which campaign table a participant's activity_id refers to."""

    LOTTERY_DRAW = "lottery_draw"
    SECOND_KILL = "second_kill"


class Participant(Base):
    """One user's participation in one lottery draw or second-kill event."""

    __tablename__ = "participants"

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
    )
    activity_kind: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
    )
    activity_id: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
    )
    user_id: Mapped[int] = mapped_column(
        BigInteger,
        nullable=False,
    )
    participated_at: Mapped[int] = mapped_column(
        BigInteger,
        nullable=False,
    )

    __table_args__ = (
        # One participation per user per campaign; the store relies on this
        # instead of the has_user_participated pre-check
        UniqueConstraint(
            "activity_kind",
            "activity_id",
            "user_id",
            name="uq_participants_activity_user",
        ),
        Index("idx_participants_activity", "activity_kind", "activity_id"),
    )

    def __repr__(self) -> str:
        return (
            f"Participant(id={self.id!r}, activity_kind={self.activity_kind!r}, "
            f"activity_id={self.activity_id!r}, user_id={self.user_id!r})"
        )
