"""SQLAlchemy ORM models."""

from promo_store.models.base import TimestampMixin, epoch_now
from promo_store.models.campaign import (
    CampaignMixin,
    CampaignStatus,
    LotteryDraw,
    SecondKillEvent,
)
from promo_store.models.participant import CampaignKind, Participant

__all__ = [
    "TimestampMixin",
    "epoch_now",
    "CampaignKind",
    "CampaignStatus",
    "CampaignMixin",
    "LotteryDraw",
    "SecondKillEvent",
    "Participant",
]
