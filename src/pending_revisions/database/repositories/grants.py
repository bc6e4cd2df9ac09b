"""Repository for the grants container (partitioned by /actor_id)."""

from __future__ import annotations

from typing import cast

from pending_revisions.database.repositories.base import BaseRepository
from pending_revisions.models.grant import ACCEPT_REVISIONS, Grant


class GrantRepository(BaseRepository[Grant]):
    """Resource-scoped capability grants; also the default authorization provider."""

    container_name = "grants"
    model_class = Grant

    async def has_capability(self, actor_id: str, capability: str, content_id: str) -> bool:
        """True when the actor holds ``capability`` for this item or globally."""
        total = 0
        async for item in self._container.query_items(
            query=(
                "SELECT VALUE COUNT(1) FROM c WHERE c.actor_id = @actor_id"
                " AND c.capability = @capability"
                " AND (NOT IS_DEFINED(c.content_id) OR IS_NULL(c.content_id)"
                " OR c.content_id = @content_id)"
                " AND NOT IS_DEFINED(c.deleted_at)"
            ),
            parameters=[
                {"name": "@actor_id", "value": actor_id},
                {"name": "@capability", "value": capability},
                {"name": "@content_id", "value": content_id},
            ],
        ):
            total = cast("int", item)
        return total > 0

    async def can_approve(self, actor_id: str, content_id: str) -> bool:
        return await self.has_capability(actor_id, ACCEPT_REVISIONS, content_id)
