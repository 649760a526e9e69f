"""Campaign stores for lottery draws and second-kill events."""

import logging
from typing import Generic, TypeVar

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.orm import selectinload

from promo_store.core.exceptions import NotFoundError
from promo_store.models.campaign import CampaignMixin, LotteryDraw, SecondKillEvent
from promo_store.models.participant import Participant
from promo_store.schemas.campaign import CampaignCreate
from promo_store.schemas.pagination import Pagination
from promo_store.services.base import BaseStore
from promo_store.services.pagination import PaginationPolicy

CampaignT = TypeVar("CampaignT", bound=CampaignMixin)


class CampaignStore(BaseStore, Generic[CampaignT]):
    """Store for one campaign kind.

    Subclasses pick the kind by setting ``model``. Reads always return
    campaigns with their participants loaded.

    ``exists_by_name`` and ``has_user_participated`` are pre-checks only.
    Two callers can both pass them; the unique constraints on the campaign
    name and on (activity_kind, activity_id, user_id) then reject the
    second write with ConflictError.
    """

    model: type[CampaignT]

    def __init__(
        self,
        session_maker: async_sessionmaker[AsyncSession],
        pagination_policy: PaginationPolicy | None = None,
        logger: logging.Logger | None = None,
    ):
        super().__init__(session_maker, logger)
        self.pagination_policy = pagination_policy or PaginationPolicy()

    @property
    def kind(self) -> str:
        return self.model.kind.value

    async def create(self, campaign_data: CampaignCreate) -> CampaignT:
        """Create a new campaign.

        Args:
            campaign_data: Campaign creation data

        Returns:
            Created campaign with its assigned id and timestamps

        Raises:
            ConflictError: If the name is already taken for this kind
            StorageError: On any other write failure
        """
        campaign = self.model(
            name=campaign_data.name,
            description=campaign_data.description,
            start_time=campaign_data.start_time,
            end_time=campaign_data.end_time,
            status=campaign_data.status,
            participants=[],
        )

        try:
            async with self.session_maker() as session:
                session.add(campaign)
                # Assigns id and timestamps before the commit
                await session.flush()
                await session.commit()
        except SQLAlchemyError as e:
            raise self._storage_error("create", e) from e

        self.logger.debug(f"Created {self.label} {campaign.id} ({campaign.name!r})")
        return campaign

    async def get_by_id(self, campaign_id: int) -> CampaignT:
        """Get campaign by ID with participants loaded.

        Args:
            campaign_id: Campaign id

        Returns:
            The campaign

        Raises:
            NotFoundError: If no campaign has this id
            StorageError: On read failure
        """
        try:
            async with self.session_maker() as session:
                result = await session.execute(
                    select(self.model)
                    .options(selectinload(self.model.participants))
                    .where(self.model.id == campaign_id)
                )
                campaign = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            raise self._storage_error("get", e) from e

        if campaign is None:
            self.logger.warning(f"{self.label.capitalize()} {campaign_id} not found")
            raise NotFoundError(self.label, campaign_id)

        return campaign

    async def get_by_name(self, name: str) -> CampaignT:
        """Get campaign by exact name with participants loaded.

        Raises:
            NotFoundError: If no campaign of this kind has this name
            StorageError: On read failure
        """
        try:
            async with self.session_maker() as session:
                result = await session.execute(
                    select(self.model)
                    .options(selectinload(self.model.participants))
                    .where(self.model.name == name)
                )
                campaign = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            raise self._storage_error("get", e) from e

        if campaign is None:
            self.logger.warning(f"{self.label.capitalize()} named {name!r} not found")
            raise NotFoundError(self.label, name)

        return campaign

    async def list(
        self, status: str | None = None, pagination: Pagination | None = None
    ) -> list[CampaignT]:
        """List campaigns, optionally filtered by exact status, one page at a time.

        Args:
            status: Status to match; empty or None returns every status
            pagination: Requested page, resolved by the pagination policy;
                the size is applied as given unless the policy sets max_size

        Returns:
            Campaigns ordered by id, possibly empty
        """
        window = self.pagination_policy.resolve(pagination)

        query = select(self.model).options(selectinload(self.model.participants))
        if status:
            query = query.where(self.model.status == status)
        query = query.order_by(self.model.id.asc()).offset(window.offset).limit(window.size)

        try:
            async with self.session_maker() as session:
                result = await session.execute(query)
                campaigns = list(result.scalars().all())
        except SQLAlchemyError as e:
            raise self._storage_error("list", e) from e

        return campaigns

    async def count(self, status: str | None = None) -> int:
        """Count campaigns matching the same status filter as ``list``."""
        query = select(func.count(self.model.id))
        if status:
            query = query.where(self.model.status == status)

        try:
            async with self.session_maker() as session:
                result = await session.execute(query)
                return result.scalar_one()
        except SQLAlchemyError as e:
            raise self._storage_error("count", e) from e

    async def exists_by_name(self, name: str) -> bool:
        """Check whether a campaign of this kind already uses ``name``."""
        try:
            async with self.session_maker() as session:
                result = await session.execute(
                    select(func.count(self.model.id)).where(self.model.name == name)
                )
                return result.scalar_one() > 0
        except SQLAlchemyError as e:
            raise self._storage_error("check name of", e) from e

    async def has_user_participated(self, campaign_id: int, user_id: int) -> bool:
        """Check whether a user already participates in a campaign of this kind."""
        try:
            async with self.session_maker() as session:
                result = await session.execute(
                    select(func.count(Participant.id)).where(
                        Participant.activity_kind == self.kind,
                        Participant.activity_id == campaign_id,
                        Participant.user_id == user_id,
                    )
                )
                return result.scalar_one() > 0
        except SQLAlchemyError as e:
            raise self._storage_error("check participation in", e) from e


class LotteryDrawStore(CampaignStore[LotteryDraw]):
    """Store for lottery draws."""

    model = LotteryDraw
    label = "lottery draw"


class SecondKillEventStore(CampaignStore[SecondKillEvent]):
    """Store for second-kill events."""

    model = SecondKillEvent
    label = "second-kill event"
