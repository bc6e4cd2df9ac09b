"""ContentStore backed by the content_items and revisions containers."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pending_revisions.database.repositories.content import ContentRepository
from pending_revisions.database.repositories.revisions import RevisionRepository

if TYPE_CHECKING:
    from datetime import datetime

    from azure.cosmos.aio import DatabaseProxy

    from pending_revisions.models.content import ContentItem
    from pending_revisions.models.revision import Revision


class CosmosContentStore:
    def __init__(self, database: DatabaseProxy) -> None:
        self.items = ContentRepository(database)
        self.revisions = RevisionRepository(database)

    async def get_item(self, content_id: str) -> ContentItem | None:
        return await self.items.get_item(content_id)

    async def get_content_type(self, content_id: str) -> str | None:
        item = await self.items.get_item(content_id)
        return item.content_type if item else None

    async def list_revisions(
        self,
        content_id: str,
        *,
        author_id: str | None = None,
        after: datetime | None = None,
        exclude_transient: bool = True,
        limit: int | None = None,
    ) -> list[Revision]:
        return await self.revisions.list_by_content(
            content_id,
            author_id=author_id,
            after=after,
            exclude_transient=exclude_transient,
            limit=limit,
        )

    async def get_revision(self, revision_id: str, content_id: str) -> Revision | None:
        return await self.revisions.get_for_content(revision_id, content_id)

    async def create_revision(self, revision: Revision) -> Revision:
        return await self.revisions.create(revision)
