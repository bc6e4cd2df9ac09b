"""Tests for GrantRepository capability checks."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from pending_revisions.database.repositories.grants import GrantRepository


async def _items(*values):
    for value in values:
        yield value


class TestGrantRepository:
    """Test the Grant Repository."""

    @pytest.fixture
    def repo(self) -> GrantRepository:
        mock_db = MagicMock()
        mock_container = AsyncMock()
        mock_db.get_container_client.return_value = mock_container
        return GrantRepository(mock_db)

    async def test_can_approve_counts_matching_grants(self, repo: GrantRepository) -> None:
        repo._container.query_items = MagicMock(return_value=_items(1))

        assert await repo.can_approve("alice", "post-1") is True
        kwargs = repo._container.query_items.call_args.kwargs
        params = {p["name"]: p["value"] for p in kwargs["parameters"]}
        assert params == {
            "@actor_id": "alice",
            "@capability": "accept_revisions",
            "@content_id": "post-1",
        }
        assert "IS_NULL(c.content_id)" in kwargs["query"]

    async def test_no_grant(self, repo: GrantRepository) -> None:
        repo._container.query_items = MagicMock(return_value=_items(0))

        assert await repo.can_approve("bob", "post-1") is False
