"""Repository for the accepted_pointers container (partitioned by /id)."""

from __future__ import annotations

from typing import Any, cast

from azure.core import MatchConditions
from azure.cosmos.exceptions import (
    CosmosHttpResponseError,
    CosmosResourceExistsError,
    CosmosResourceNotFoundError,
)

from pending_revisions.database.repositories.base import BaseRepository
from pending_revisions.models.pointer import AcceptedPointer

_HTTP_PRECONDITION_FAILED = 412


class PointerRepository(BaseRepository[AcceptedPointer]):
    """Accepted revision pointers, one document per content item."""

    container_name = "accepted_pointers"
    model_class = AcceptedPointer

    async def _read(self, content_id: str) -> dict[str, Any] | None:
        try:
            return cast(
                "dict[str, Any]",
                await self._container.read_item(item=content_id, partition_key=content_id),
            )
        except CosmosResourceNotFoundError:
            return None

    async def get(self, content_id: str) -> str | None:  # type: ignore[override]
        """Return the accepted revision id for an item, if one is set."""
        data = await self._read(content_id)
        if data is None:
            return None
        revision_id = data.get("revision_id")
        return revision_id if isinstance(revision_id, str) and revision_id else None

    async def compare_and_set(
        self, content_id: str, expected: str | None, revision_id: str
    ) -> bool:
        """Atomically move the pointer from ``expected`` to ``revision_id``.

        Returns False when another writer changed the pointer first.
        """
        data = await self._read(content_id)
        current = data.get("revision_id") if data else None
        if current != expected:
            return False

        if data is None:
            pointer = AcceptedPointer(id=content_id, revision_id=revision_id)
            try:
                await self._container.create_item(body=self._to_body(pointer))
            except CosmosResourceExistsError:
                return False
            return True

        if current == revision_id:
            return True

        etag = data.get("_etag")
        if not isinstance(etag, str):
            return False

        pointer = AcceptedPointer.model_validate(data)
        pointer.revision_id = revision_id
        try:
            await self._container.replace_item(
                item=content_id,
                body=self._to_body(pointer),
                etag=etag,
                match_condition=MatchConditions.IfNotModified,
            )
        except CosmosHttpResponseError as exc:
            if exc.status_code == _HTTP_PRECONDITION_FAILED:
                return False
            raise
        return True
