"""Campaign models for lottery draws and second-kill events.

Both kinds share one column layout (``CampaignMixin``) but live in separate
tables. Their participants come from the shared ``participants`` table,
matched on ``activity_id`` and the kind's ``activity_kind`` value. One
column cannot reference two tables, so there is no database foreign key:
the ORM relationship carries both cascades instead. Deleting a campaign
through a session deletes its participants, and changing its id rewrites
their activity_id.
"""

from typing import ClassVar, List, Optional

from sqlalchemy import BigInteger, Index, Integer, String, Text, and_
from sqlalchemy.orm import Mapped, declared_attr, foreign, mapped_column, relationship

from promo_store.core.database import Base
from promo_store.models.base import TimestampMixin
from promo_store.models.participant import CampaignKind, Participant


class CampaignStatus:
    """Conventional status values. The store treats status as opaque."""

    PENDING = "pending"
    ACTIVE = "active"
    ENDED = "ended"


class CampaignMixin(TimestampMixin):
    """Columns and participant relationship shared by both campaign kinds."""

    kind: ClassVar[CampaignKind]

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )
    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
    )
    description: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True,
    )
    start_time: Mapped[int] = mapped_column(
        BigInteger,
        nullable=False,
    )
    end_time: Mapped[int] = mapped_column(
        BigInteger,
        nullable=False,
    )
    status: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default=CampaignStatus.PENDING,
    )

    @declared_attr
    def participants(cls) -> Mapped[List[Participant]]:
        kind = cls.kind.value
        return relationship(
            Participant,
            primaryjoin=lambda: and_(
                foreign(Participant.activity_id) == cls.id,
                Participant.activity_kind == kind,
            ),
            order_by=lambda: [Participant.participated_at, Participant.id],
            cascade="all",
            # No ON UPDATE CASCADE in the database; the ORM rewrites activity_id
            passive_updates=False,
            # Both kinds write participants.activity_id; kind keeps them apart
            overlaps="participants",
            # Always fetched with a second SELECT ... IN round-trip
            lazy="selectin",
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id!r}, name={self.name!r}, status={self.status!r})"


class LotteryDraw(CampaignMixin, Base):
    """A lottery draw campaign."""

    __tablename__ = "lottery_draws"

    kind = CampaignKind.LOTTERY_DRAW

    __table_args__ = (
        Index("idx_lottery_draws_status", "status"),
    )


class SecondKillEvent(CampaignMixin, Base):
    """A second-kill (flash-sale) campaign."""

    __tablename__ = "second_kill_events"

    kind = CampaignKind.SECOND_KILL

    __table_args__ = (
        Index("idx_second_kill_events_status", "status"),
    )
