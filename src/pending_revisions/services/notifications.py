"""Selection of the advisory notice shown to a viewer of a content item."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pending_revisions.models.editing_mode import EditingMode
from pending_revisions.models.notice import Notice, NoticeKind

if TYPE_CHECKING:
    from pending_revisions.models.actor import Actor
    from pending_revisions.models.content import ContentItem
    from pending_revisions.services.access import AccessGate
    from pending_revisions.services.editing_mode import EditingModeResolver
    from pending_revisions.services.markers import PendingMarkers
    from pending_revisions.services.pending import PendingRevisionDetector

logger = logging.getLogger(__name__)


class NotificationContextBuilder:
    """Pick at most one notice per view; the first matching rule wins."""

    def __init__(
        self,
        resolver: EditingModeResolver,
        gate: AccessGate,
        detector: PendingRevisionDetector,
        markers: PendingMarkers,
    ) -> None:
        self._resolver = resolver
        self._gate = gate
        self._detector = detector
        self._markers = markers

    async def context_for(self, item: ContentItem, actor: Actor) -> Notice:
        if await self._markers.consume(item.id, actor.id):
            baseline = await self._detector.accepted_baseline(item)
            logger.debug("Pending marker consumed — content=%s actor=%s", item.id, actor.id)
            return Notice(
                kind=NoticeKind.JUST_FILED_AS_PENDING,
                target_revision_id=baseline.revision_id,
            )

        can_approve = await self._gate.can_approve(actor, item)
        if not can_approve:
            mode = await self._resolver.resolve(item)
            if mode == EditingMode.APPROVAL_REQUIRED:
                return Notice(kind=NoticeKind.REQUIRES_APPROVAL)
            if mode == EditingMode.LOCKED:
                return Notice(kind=NoticeKind.LOCKED)

        summary = await self._detector.summary(item)
        if summary.count > 0 and summary.diff is not None:
            latest = await self._detector.latest_revision(item)
            if latest is not None and latest.id != summary.diff.accepted_id:
                return Notice(
                    kind=NoticeKind.DIVERGED_FROM_ACCEPTED,
                    diff_from=summary.diff.accepted_id,
                    diff_to=latest.id,
                    viewer_can_approve=can_approve,
                )

        return Notice(viewer_can_approve=can_approve)
