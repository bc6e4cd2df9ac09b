"""Repository for the revisions container (partitioned by /content_id)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pending_revisions.database.repositories.base import BaseRepository
from pending_revisions.models.base import DocumentBase
from pending_revisions.models.revision import Revision, newest_first

if TYPE_CHECKING:
    from datetime import datetime


class RevisionRepository(BaseRepository[Revision]):
    container_name = "revisions"
    model_class = Revision

    @staticmethod
    def _filters(
        content_id: str, author_id: str | None, exclude_transient: bool
    ) -> tuple[str, list[dict[str, Any]]]:
        where = "c.content_id = @content_id AND NOT IS_DEFINED(c.deleted_at)"
        params: list[dict[str, Any]] = [{"name": "@content_id", "value": content_id}]
        if author_id is not None:
            where += " AND c.author_id = @author_id"
            params.append({"name": "@author_id", "value": author_id})
        if exclude_transient:
            where += " AND (NOT IS_DEFINED(c.transient) OR c.transient = false)"
        return where, params

    async def list_by_content(
        self,
        content_id: str,
        *,
        author_id: str | None = None,
        after: datetime | None = None,
        exclude_transient: bool = True,
        limit: int | None = None,
    ) -> list[Revision]:
        """Fetch revisions of an item, newest first (ties broken by id).

        ``after`` is exclusive and compared on parsed timestamps rather than
        in SQL, since stored ISO strings do not sort reliably when fractional
        seconds vary in length. With a ``limit`` only ids and timestamps are
        queried and the selected revisions are read individually.
        """
        where, params = self._filters(content_id, author_id, exclude_transient)
        if limit is not None:
            return await self._newest(content_id, where, params, after, limit)

        revisions = await self.query(f"SELECT * FROM c WHERE {where}", params, partition_key=content_id)
        if after is not None:
            revisions = [r for r in revisions if r.created_at > after]
        return newest_first(revisions)

    async def _newest(
        self,
        content_id: str,
        where: str,
        params: list[dict[str, Any]],
        after: datetime | None,
        limit: int,
    ) -> list[Revision]:
        stamps: list[DocumentBase] = []
        async for data in self._container.query_items(
            query=f"SELECT c.id, c.created_at FROM c WHERE {where}",
            parameters=params,
            partition_key=content_id,
        ):
            stamps.append(DocumentBase.model_validate(data))
        if after is not None:
            stamps = [s for s in stamps if s.created_at > after]
        stamps.sort(key=lambda s: (s.created_at, s.id), reverse=True)

        revisions: list[Revision] = []
        for stamp in stamps[:limit]:
            revision = await self.get(stamp.id, content_id)
            if revision is not None:
                revisions.append(revision)
        return revisions

    async def get_for_content(self, revision_id: str, content_id: str) -> Revision | None:
        """Read a revision, only if it belongs to ``content_id``."""
        revision = await self.get(revision_id, content_id)
        if revision is None or revision.content_id != content_id:
            return None
        return revision
