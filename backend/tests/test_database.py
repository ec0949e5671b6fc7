"""
Employee Registry Backend: Session Dependency Tests
======================================================

What:  get_db_session commit/rollback behaviour, driven by hand against a
       mocked session factory.
"""

from unittest.mock import MagicMock, patch

import pytest
from sqlalchemy.exc import OperationalError

from app.database import get_db_session
from app.exceptions import DatabaseError


def _factory_for(session) -> MagicMock:
    factory = MagicMock()
    factory.return_value.__aenter__.return_value = session
    return factory


class TestGetDbSession:

    @pytest.mark.asyncio
    async def test_commits_when_handler_succeeds(self, mock_db_session):
        with patch("app.database.async_session_factory", _factory_for(mock_db_session)):
            gen = get_db_session()
            assert await gen.__anext__() is mock_db_session
            with pytest.raises(StopAsyncIteration):
                await gen.__anext__()

        mock_db_session.commit.assert_awaited_once()
        mock_db_session.rollback.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_handler_error_rolls_back_and_propagates(self, mock_db_session):
        with patch("app.database.async_session_factory", _factory_for(mock_db_session)):
            gen = get_db_session()
            await gen.__anext__()
            with pytest.raises(RuntimeError, match="boom"):
                await gen.athrow(RuntimeError("boom"))

        mock_db_session.rollback.assert_awaited_once()
        mock_db_session.commit.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_commit_failure_becomes_database_error(self, mock_db_session):
        mock_db_session.commit.side_effect = OperationalError(
            "COMMIT", {}, Exception("server closed the connection")
        )

        with patch("app.database.async_session_factory", _factory_for(mock_db_session)):
            gen = get_db_session()
            await gen.__anext__()
            with pytest.raises(DatabaseError) as exc_info:
                await gen.__anext__()

        assert exc_info.value.context == {
            "operation": "commit",
            "error_type": "OperationalError",
        }
        assert "server closed" not in exc_info.value.message
        mock_db_session.rollback.assert_awaited_once()
        mock_db_session.close.assert_awaited_once()
