"""Campaign schemas shared by lottery draws and second-kill events."""

from pydantic import BaseModel, Field

from promo_store.models.campaign import CampaignStatus
from promo_store.schemas.participant import ParticipantResponse


class CampaignCreate(BaseModel):
    """Schema for campaign creation.

    Times are epoch seconds. Ordering of start_time and end_time is the
    caller's concern.
    """

    name: str
    description: str | None = None
    start_time: int
    end_time: int
    status: str = Field(default=CampaignStatus.PENDING, max_length=20)


class CampaignResponse(BaseModel):
    """Schema for campaign response with its participants."""

    id: int
    name: str
    description: str | None
    start_time: int
    end_time: int
    status: str
    created_at: int
    updated_at: int
    participants: list[ParticipantResponse] = []

    model_config = {"from_attributes": True}


class CampaignListResponse(BaseModel):
    """Schema for one page of campaigns plus the unpaged total."""

    campaigns: list[CampaignResponse]
    total: int
