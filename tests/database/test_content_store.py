"""Tests for CosmosContentStore delegation."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from pending_revisions.database.content_store import CosmosContentStore
from pending_revisions.models.content import ContentItem
from pending_revisions.stores import ContentStore


@pytest.fixture
def store() -> CosmosContentStore:
    mock_db = MagicMock()
    mock_db.get_container_client.side_effect = lambda name: AsyncMock(name=name)
    return CosmosContentStore(mock_db)


def test_satisfies_protocol(store: CosmosContentStore) -> None:
    assert isinstance(store, ContentStore)


async def test_get_content_type(store: CosmosContentStore) -> None:
    store.items.get_item = AsyncMock(return_value=ContentItem(id="post-1", content_type="article"))

    assert await store.get_content_type("post-1") == "article"


async def test_get_content_type_missing(store: CosmosContentStore) -> None:
    store.items.get_item = AsyncMock(return_value=None)

    assert await store.get_content_type("post-1") is None


async def test_list_revisions_passes_filters(store: CosmosContentStore) -> None:
    store.revisions.list_by_content = AsyncMock(return_value=[])

    await store.list_revisions("post-1", author_id="alice", limit=1)

    store.revisions.list_by_content.assert_awaited_once_with(
        "post-1", author_id="alice", after=None, exclude_transient=True, limit=1
    )
