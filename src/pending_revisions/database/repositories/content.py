"""Repository for the content_items container (partitioned by /id)."""

from __future__ import annotations

from pending_revisions.database.repositories.base import BaseRepository
from pending_revisions.models.content import ContentItem


class ContentRepository(BaseRepository[ContentItem]):
    container_name = "content_items"
    model_class = ContentItem

    async def get_item(self, content_id: str) -> ContentItem | None:
        return await self.get(content_id, content_id)
