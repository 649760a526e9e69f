"""Participant schemas for store input and output."""

from uuid import uuid4

from pydantic import BaseModel, Field

from promo_store.models.participant import CampaignKind


class ParticipantCreate(BaseModel):
    """Participation record as supplied by the caller."""

    id: str = Field(default_factory=lambda: str(uuid4()), max_length=36)
    activity_kind: CampaignKind
    activity_id: int
    user_id: int
    participated_at: int


class ParticipantResponse(BaseModel):
    """Schema for participant response."""

    id: str
    activity_kind: CampaignKind
    activity_id: int
    user_id: int
    participated_at: int

    model_config = {"from_attributes": True}
