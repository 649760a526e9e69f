"""Participant store for the shared participation ledger."""

from sqlalchemy.exc import SQLAlchemyError

from promo_store.models.participant import Participant
from promo_store.schemas.participant import ParticipantCreate
from promo_store.services.base import BaseStore


class ParticipantStore(BaseStore):
    """Append-only store of participation records for both campaign kinds."""

    label = "participant"

    async def add(self, participant_data: ParticipantCreate) -> Participant:
        """Add a participation record as supplied.

        The referenced campaign is not checked for existence.

        Args:
            participant_data: Fully populated participation record

        Returns:
            The stored participant

        Raises:
            ConflictError: If the id is reused or the user already
                participates in this campaign
            StorageError: On any other write failure
        """
        participant = Participant(
            id=participant_data.id,
            activity_kind=participant_data.activity_kind.value,
            activity_id=participant_data.activity_id,
            user_id=participant_data.user_id,
            participated_at=participant_data.participated_at,
        )

        try:
            async with self.session_maker() as session:
                session.add(participant)
                await session.commit()
        except SQLAlchemyError as e:
            raise self._storage_error("add", e) from e

        self.logger.debug(
            f"User {participant.user_id} joined {participant.activity_kind} "
            f"{participant.activity_id}"
        )
        return participant
