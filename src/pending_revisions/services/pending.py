"""Detection of revisions newer than the accepted one."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pending_revisions.models.pending import AcceptedBaseline, DiffTarget, PendingSummary, RevisionState
from pending_revisions.models.revision import Revision, newest_first

if TYPE_CHECKING:
    from collections.abc import Iterable

    from pending_revisions.models.content import ContentItem
    from pending_revisions.stores import ContentStore, PointerStore

logger = logging.getLogger(__name__)


class PendingRevisionDetector:
    """Compare revision timestamps against the accepted revision pointer.

    Without a pointer the item itself is the accepted version and nothing is
    pending. A pointer that does not resolve to a revision of the same item
    falls back to the item's own id and creation time.
    """

    def __init__(self, contents: ContentStore, pointers: PointerStore) -> None:
        self._contents = contents
        self._pointers = pointers

    async def _baseline_for(self, item: ContentItem, revision_id: str | None) -> AcceptedBaseline:
        if revision_id:
            revision = await self._contents.get_revision(revision_id, item.id)
            if revision is not None and revision.content_id == item.id:
                return AcceptedBaseline(revision_id=revision.id, created_at=revision.created_at)
            logger.debug(
                "Accepted pointer does not resolve, using item as baseline — content=%s revision=%s",
                item.id,
                revision_id,
            )
        return AcceptedBaseline(revision_id=item.id, created_at=item.created_at, is_implicit=True)

    async def accepted_baseline(self, item: ContentItem) -> AcceptedBaseline:
        return await self._baseline_for(item, await self._pointers.get(item.id))

    async def _pending(self, item: ContentItem) -> tuple[AcceptedBaseline, list[Revision]]:
        pointer = await self._pointers.get(item.id)
        baseline = await self._baseline_for(item, pointer)
        if not pointer:
            return baseline, []

        revisions = await self._contents.list_revisions(
            item.id, after=baseline.created_at, exclude_transient=True
        )
        pending = [
            r
            for r in revisions
            if not r.transient and r.created_at > baseline.created_at and r.id != baseline.revision_id
        ]
        return baseline, newest_first(pending)

    async def pending_revisions(self, item: ContentItem) -> list[Revision]:
        """Non-transient revisions newer than the accepted one, newest first."""
        _, pending = await self._pending(item)
        return pending

    async def pending_count(self, item: ContentItem) -> int:
        return len(await self.pending_revisions(item))

    async def diff_target(self, item: ContentItem) -> DiffTarget | None:
        baseline, pending = await self._pending(item)
        if not pending:
            return None
        return DiffTarget(accepted_id=baseline.revision_id, latest_pending_id=pending[0].id)

    async def summary(self, item: ContentItem) -> PendingSummary:
        """Pending count plus the diff between accepted and latest pending."""
        baseline, pending = await self._pending(item)
        diff = (
            DiffTarget(accepted_id=baseline.revision_id, latest_pending_id=pending[0].id)
            if pending
            else None
        )
        return PendingSummary(content_id=item.id, count=len(pending), diff=diff)

    async def latest_revision(
        self, item: ContentItem, *, author_id: str | None = None
    ) -> Revision | None:
        """Most recent non-transient revision, optionally by one author."""
        revisions = await self._contents.list_revisions(
            item.id, author_id=author_id, exclude_transient=True, limit=1
        )
        candidates = [r for r in revisions if not r.transient]
        if author_id is not None:
            candidates = [r for r in candidates if r.author_id == author_id]
        ordered = newest_first(candidates)
        return ordered[0] if ordered else None

    async def annotate(self, item: ContentItem, revisions: Iterable[Revision]) -> list[RevisionState]:
        """Flag the accepted revision as current and newer ones as pending."""
        pointer = await self._pointers.get(item.id)
        baseline = await self._baseline_for(item, pointer)
        states = []
        for revision in revisions:
            current = revision.id == baseline.revision_id
            pending = (
                bool(pointer)
                and not current
                and not revision.transient
                and revision.created_at > baseline.created_at
            )
            states.append(RevisionState(revision_id=revision.id, current=current, pending=pending))
        return states
