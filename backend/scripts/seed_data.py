"""Seed data script for development and testing.

Creates, through the stores:
- 1 active lottery draw and 1 active second-kill event
- SEED_PARTICIPANTS participants in each (user ids 1..N)

Existing campaigns with the same name are reused, and users who already
participate are skipped, so the script can be run repeatedly.

Environment Variables:
    CAMPAIGN_DURATION_MINUTES: Campaign duration in minutes (default: 20)
    SEED_PARTICIPANTS: Participants per campaign (default: 50)

Usage:
    cd backend && python -m scripts.seed_data
"""

import asyncio
import os
import random

from promo_store.core.config import settings
from promo_store.core.database import create_engine, create_session_maker, init_models
from promo_store.core.logging import configure_logging
from promo_store.models import CampaignStatus, epoch_now
from promo_store.schemas import CampaignCreate, ParticipantCreate
from promo_store.services import CampaignStore, ParticipantStore, build_stores

# Configuration from environment variables
CAMPAIGN_DURATION_MINUTES = int(os.getenv("CAMPAIGN_DURATION_MINUTES", "20"))
SEED_PARTICIPANTS = int(os.getenv("SEED_PARTICIPANTS", "50"))


async def seed_campaign(store: CampaignStore, name: str, description: str):
    """Create an active campaign, or return the existing one with this name."""
    print(f"Seeding {store.label}...")

    if await store.exists_by_name(name):
        print(f"  {name!r} already exists, skipping...")
        return await store.get_by_name(name)

    now = epoch_now()
    campaign = await store.create(
        CampaignCreate(
            name=name,
            description=description,
            start_time=now,
            end_time=now + CAMPAIGN_DURATION_MINUTES * 60,
            status=CampaignStatus.ACTIVE,
        )
    )
    print(f"  Created {store.label}: {campaign.id} ({campaign.name})")
    return campaign


async def seed_participants(
    campaign_store: CampaignStore, participants: ParticipantStore, campaign_id: int
) -> int:
    """Add SEED_PARTICIPANTS users to a campaign, skipping existing ones."""
    added = 0
    now = epoch_now()

    for user_id in range(1, SEED_PARTICIPANTS + 1):
        if await campaign_store.has_user_participated(campaign_id, user_id):
            continue
        await participants.add(
            ParticipantCreate(
                activity_kind=campaign_store.model.kind,
                activity_id=campaign_id,
                user_id=user_id,
                participated_at=now - random.randint(0, 600),
            )
        )
        added += 1

    print(f"  Added {added} participants to {campaign_store.label} {campaign_id}")
    return added


async def main():
    """Main seed function."""
    configure_logging(settings.LOG_LEVEL)

    print("=" * 60)
    print("Promo Store - Seed Data Script")
    print("=" * 60)
    print(f"  CAMPAIGN_DURATION_MINUTES: {CAMPAIGN_DURATION_MINUTES}")
    print(f"  SEED_PARTICIPANTS: {SEED_PARTICIPANTS}")
    print("=" * 60)

    engine = create_engine(settings)
    await init_models(engine)
    stores = build_stores(create_session_maker(engine))

    try:
        draw = await seed_campaign(
            stores.lottery_draws, "Weekly Lucky Draw", "One winner every week"
        )
        event = await seed_campaign(
            stores.second_kill_events, "Midnight Flash Sale", "Limited stock at 00:00"
        )

        await seed_participants(stores.lottery_draws, stores.participants, draw.id)
        await seed_participants(stores.second_kill_events, stores.participants, event.id)

        draw = await stores.lottery_draws.get_by_id(draw.id)
        event = await stores.second_kill_events.get_by_id(event.id)
    finally:
        await engine.dispose()

    print("=" * 60)
    print("Seed data complete!")
    print(f"  Lottery draw: {draw.id} ({len(draw.participants)} participants)")
    print(f"  Second-kill event: {event.id} ({len(event.participants)} participants)")
    print("=" * 60)


if __name__ == "__main__":
    asyncio.run(main())
