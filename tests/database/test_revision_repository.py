"""Tests for RevisionRepository custom query methods."""

from datetime import UTC, datetime, timedelta
from unittest.mock import AsyncMock, MagicMock

import pytest

from pending_revisions.database.repositories.revisions import RevisionRepository
from pending_revisions.models.revision import Revision

_T0 = datetime(2026, 1, 1, tzinfo=UTC)


async def _items(*rows):
    for row in rows:
        yield row


def _rev(revision_id: str, minutes: int, **kwargs) -> Revision:
    return Revision(
        id=revision_id,
        content_id="post-1",
        author_id=kwargs.pop("author_id", "alice"),
        created_at=_T0 + timedelta(minutes=minutes),
        **kwargs,
    )


class TestRevisionRepository:
    """Test the Revision Repository."""

    @pytest.fixture
    def repo(self) -> RevisionRepository:
        mock_db = MagicMock()
        mock_container = AsyncMock()
        mock_db.get_container_client.return_value = mock_container
        return RevisionRepository(mock_db)

    async def test_list_by_content_orders_newest_first(self, repo: RevisionRepository) -> None:
        """Verify ordering by creation time with id as tie breaker."""
        repo.query = AsyncMock(return_value=[_rev("a", 1), _rev("c", 5), _rev("b", 5)])

        result = await repo.list_by_content("post-1")

        assert [r.id for r in result] == ["c", "b", "a"]
        query_str, params = repo.query.call_args[0]
        assert "@content_id" in query_str
        assert "c.transient" in query_str
        assert {"name": "@content_id", "value": "post-1"} in params
        assert repo.query.call_args.kwargs["partition_key"] == "post-1"

    async def test_list_by_content_filters(self, repo: RevisionRepository) -> None:
        repo.query = AsyncMock(return_value=[_rev("a", 1), _rev("b", 5), _rev("c", 9)])

        result = await repo.list_by_content(
            "post-1",
            author_id="alice",
            after=_T0 + timedelta(minutes=1),
            exclude_transient=False,
        )

        assert [r.id for r in result] == ["c", "b"]
        query_str, params = repo.query.call_args[0]
        assert "@author_id" in query_str
        assert "c.transient" not in query_str
        assert {"name": "@author_id", "value": "alice"} in params

    async def test_list_with_limit_reads_only_newest(self, repo: RevisionRepository) -> None:
        """Verify limited listings project timestamps and read just the selected ids."""
        stamps = [
            {"id": "a", "created_at": "2026-01-01T00:01:00"},
            {"id": "b", "created_at": "2026-01-01T00:05:00.5+00:00"},
            {"id": "c", "created_at": "2026-01-01T00:05:00+00:00"},
        ]
        repo._container.query_items = MagicMock(return_value=_items(*stamps))
        repo._container.read_item.return_value = {"id": "b", "content_id": "post-1", "author_id": "alice"}

        result = await repo.list_by_content("post-1", author_id="alice", limit=1)

        assert [r.id for r in result] == ["b"]
        kwargs = repo._container.query_items.call_args.kwargs
        assert kwargs["query"].startswith("SELECT c.id, c.created_at FROM c")
        assert kwargs["partition_key"] == "post-1"
        repo._container.read_item.assert_awaited_once_with(item="b", partition_key="post-1")

    async def test_get_for_content_checks_owner(self, repo: RevisionRepository) -> None:
        repo._container.read_item.return_value = {
            "id": "r1",
            "content_id": "post-2",
            "author_id": "alice",
        }

        assert await repo.get_for_content("r1", "post-1") is None
