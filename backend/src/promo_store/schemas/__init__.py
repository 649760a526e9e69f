"""Pydantic schemas for store input and output."""

from promo_store.schemas.campaign import (
    CampaignCreate,
    CampaignListResponse,
    CampaignResponse,
)
from promo_store.schemas.pagination import Pagination
from promo_store.schemas.participant import ParticipantCreate, ParticipantResponse

__all__ = [
    "CampaignCreate",
    "CampaignResponse",
    "CampaignListResponse",
    "Pagination",
    "ParticipantCreate",
    "ParticipantResponse",
]
