"""Tests for error mapping, logging and cancellation in the stores.

Driver failures are injected through a mocked session factory.
"""

import asyncio
import logging

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from promo_store.core.exceptions import ConflictError, NotFoundError, StorageError
from promo_store.models import CampaignKind
from promo_store.schemas import ParticipantCreate
from promo_store.services import LotteryDrawStore, ParticipantStore, SecondKillEventStore

LOGGER_NAME = "tests.promo_store"


def operational_error() -> OperationalError:
    return OperationalError("SELECT 1", {}, Exception("connection refused"))


def integrity_error() -> IntegrityError:
    return IntegrityError("INSERT", {}, Exception("UNIQUE constraint failed"))


@pytest.fixture
def logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)


class TestStorageErrors:
    """Test that driver failures surface as StorageError."""

    @pytest.mark.asyncio
    async def test_read_failure(self, mock_session_maker, mock_session, logger, caplog):
        mock_session.execute.side_effect = operational_error()
        store = LotteryDrawStore(mock_session_maker, logger=logger)

        with caplog.at_level(logging.ERROR, logger=LOGGER_NAME):
            with pytest.raises(StorageError) as exc_info:
                await store.get_by_id(1)

        assert not isinstance(exc_info.value, ConflictError)
        assert isinstance(exc_info.value.__cause__, OperationalError)
        assert "Failed to get lottery draw" in caplog.text

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "call",
        [
            lambda s: s.list("active"),
            lambda s: s.count(),
            lambda s: s.exists_by_name("x"),
            lambda s: s.has_user_participated(1, 2),
            lambda s: s.get_by_name("x"),
        ],
    )
    async def test_every_read_wraps_failure(self, mock_session_maker, mock_session, call):
        mock_session.execute.side_effect = operational_error()
        store = SecondKillEventStore(mock_session_maker)

        with pytest.raises(StorageError):
            await call(store)

    @pytest.mark.asyncio
    async def test_write_failure(self, mock_session_maker, mock_session, make_campaign):
        mock_session.commit.side_effect = operational_error()
        store = LotteryDrawStore(mock_session_maker)

        with pytest.raises(StorageError) as exc_info:
            await store.create(make_campaign())

        assert not isinstance(exc_info.value, ConflictError)

    @pytest.mark.asyncio
    async def test_create_flushes_before_commit(
        self, mock_session_maker, mock_session, make_campaign
    ):
        """Nothing runs against the session after the commit."""
        store = LotteryDrawStore(mock_session_maker)

        await store.create(make_campaign())

        assert [c[0] for c in mock_session.method_calls] == ["add", "flush", "commit"]
        mock_session.refresh.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_flush_failure_skips_commit(
        self, mock_session_maker, mock_session, make_campaign
    ):
        mock_session.flush.side_effect = operational_error()
        store = LotteryDrawStore(mock_session_maker)

        with pytest.raises(StorageError):
            await store.create(make_campaign())

        mock_session.commit.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_integrity_error_is_conflict(
        self, mock_session_maker, mock_session, logger, caplog
    ):
        mock_session.commit.side_effect = integrity_error()
        store = ParticipantStore(mock_session_maker, logger=logger)

        with caplog.at_level(logging.ERROR, logger=LOGGER_NAME):
            with pytest.raises(ConflictError) as exc_info:
                await store.add(
                    ParticipantCreate(
                        activity_kind=CampaignKind.LOTTERY_DRAW,
                        activity_id=1,
                        user_id=1,
                        participated_at=0,
                    )
                )

        assert isinstance(exc_info.value.__cause__, IntegrityError)
        assert "Failed to add participant" in caplog.text

    @pytest.mark.asyncio
    async def test_not_found_logs_warning(self, stores, caplog):
        store = LotteryDrawStore(
            stores.lottery_draws.session_maker, logger=logging.getLogger(LOGGER_NAME)
        )

        with caplog.at_level(logging.WARNING, logger=LOGGER_NAME):
            with pytest.raises(NotFoundError):
                await store.get_by_id(404)

        records = [r for r in caplog.records if r.name == LOGGER_NAME]
        assert [r.levelno for r in records] == [logging.WARNING]
        assert "404" in records[0].getMessage()


class TestCancellation:
    """Test that cancellation is propagated, never converted."""

    @pytest.mark.asyncio
    async def test_cancelled_error_passes_through(self, mock_session_maker, mock_session):
        mock_session.execute.side_effect = asyncio.CancelledError()
        store = LotteryDrawStore(mock_session_maker)

        with pytest.raises(asyncio.CancelledError):
            await store.exists_by_name("x")

    @pytest.mark.asyncio
    async def test_cancel_in_flight_query(self, mock_session_maker, mock_session):
        started = asyncio.Event()

        async def hang(*args, **kwargs):
            started.set()
            await asyncio.Event().wait()

        mock_session.execute.side_effect = hang
        store = SecondKillEventStore(mock_session_maker)

        task = asyncio.create_task(store.get_by_id(1))
        await started.wait()
        task.cancel()

        with pytest.raises(asyncio.CancelledError):
            await task
        # The session was still closed through its context manager
        mock_session_maker.return_value.__aexit__.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_deadline(self, mock_session_maker, mock_session):
        async def hang(*args, **kwargs):
            await asyncio.Event().wait()

        mock_session.execute.side_effect = hang
        store = LotteryDrawStore(mock_session_maker)

        with pytest.raises(asyncio.TimeoutError):
            await asyncio.wait_for(store.list(), timeout=0.05)
