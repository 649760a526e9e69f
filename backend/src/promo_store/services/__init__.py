"""Campaign and participant stores."""

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from promo_store.services.campaign_store import (
    CampaignStore,
    LotteryDrawStore,
    SecondKillEventStore,
)
from promo_store.services.pagination import PageWindow, PaginationPolicy
from promo_store.services.participant_store import ParticipantStore


@dataclass(frozen=True)
class Stores:
    """The three stores sharing one session factory."""

    lottery_draws: LotteryDrawStore
    second_kill_events: SecondKillEventStore
    participants: ParticipantStore


def build_stores(
    session_maker: async_sessionmaker[AsyncSession],
    pagination_policy: PaginationPolicy | None = None,
) -> Stores:
    """Build all stores over one session factory."""
    return Stores(
        lottery_draws=LotteryDrawStore(session_maker, pagination_policy),
        second_kill_events=SecondKillEventStore(session_maker, pagination_policy),
        participants=ParticipantStore(session_maker),
    )


__all__ = [
    "CampaignStore",
    "LotteryDrawStore",
    "SecondKillEventStore",
    "ParticipantStore",
    "PaginationPolicy",
    "PageWindow",
    "Stores",
    "build_stores",
]
