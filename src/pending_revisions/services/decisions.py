"""Save-time state machine deciding between accepted, pending and rejected."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pending_revisions.models.decision import DecisionReason, SaveDecision, SaveOutcome
from pending_revisions.models.editing_mode import EditingMode

if TYPE_CHECKING:
    from pending_revisions.models.actor import Actor
    from pending_revisions.models.content import ContentItem
    from pending_revisions.models.revision import Revision
    from pending_revisions.services.access import AccessGate
    from pending_revisions.services.editing_mode import EditingModeResolver
    from pending_revisions.services.markers import PendingMarkers
    from pending_revisions.services.pending import PendingRevisionDetector
    from pending_revisions.stores import ContentStore, PointerStore

logger = logging.getLogger(__name__)


class SaveDecisionEngine:
    """Decide what a save attempt does to the accepted revision pointer.

    Rules, first match wins:

    1. ``locked`` and the actor cannot approve: rejected, nothing is written.
    2. A pending marker is set for ``(item, actor)``.
    3. Mode is not ``open`` and the actor cannot approve: filed as pending.
    4. The actor asked to save as pending: filed as pending.
    5. Otherwise accepted: the pointer moves to the actor's newest
       non-transient revision and the marker is cleared.

    Pending outcomes keep the marker so the next view can explain the save.
    The mode and the approval check are evaluated once per decision.
    """

    def __init__(
        self,
        resolver: EditingModeResolver,
        gate: AccessGate,
        detector: PendingRevisionDetector,
        contents: ContentStore,
        pointers: PointerStore,
        markers: PendingMarkers,
    ) -> None:
        self._resolver = resolver
        self._gate = gate
        self._detector = detector
        self._contents = contents
        self._pointers = pointers
        self._markers = markers

    async def _evaluate(self, item: ContentItem, actor: Actor) -> tuple[EditingMode, bool]:
        mode = await self._resolver.resolve(item)
        can_approve = await self._gate.can_approve(actor, item)
        return mode, can_approve

    @staticmethod
    def _blocks(mode: EditingMode, can_approve: bool) -> bool:
        return mode == EditingMode.LOCKED and not can_approve

    async def check_save_allowed(self, item: ContentItem, actor: Actor) -> bool:
        """Pre-write guard: False means the save must be aborted before persisting."""
        mode, can_approve = await self._evaluate(item, actor)
        return not self._blocks(mode, can_approve)

    async def decide(
        self,
        item: ContentItem,
        actor: Actor,
        *,
        save_as_pending: bool = False,
    ) -> SaveDecision:
        """Run the save state machine for a revision the actor just wrote.

        A rejected decision means the caller must not persist the change.
        """
        mode, can_approve = await self._evaluate(item, actor)
        return await self._decide(item, actor, mode, can_approve, save_as_pending=save_as_pending)

    async def submit(
        self,
        item: ContentItem,
        actor: Actor,
        revision: Revision,
        *,
        save_as_pending: bool = False,
    ) -> SaveDecision:
        """Guard, persist ``revision``, then decide. Rejected saves write nothing."""
        mode, can_approve = await self._evaluate(item, actor)
        if not self._blocks(mode, can_approve):
            revision.content_id = item.id
            revision.author_id = actor.id
            await self._contents.create_revision(revision)
            logger.debug("Revision written — content=%s revision=%s", item.id, revision.id)
        return await self._decide(item, actor, mode, can_approve, save_as_pending=save_as_pending)

    async def _decide(
        self,
        item: ContentItem,
        actor: Actor,
        mode: EditingMode,
        can_approve: bool,
        *,
        save_as_pending: bool,
    ) -> SaveDecision:
        previous = await self._pointers.get(item.id)

        def result(outcome: SaveOutcome, reason: DecisionReason, **extra: object) -> SaveDecision:
            decision = SaveDecision(
                outcome=outcome,
                reason=reason,
                content_id=item.id,
                actor_id=actor.id,
                editing_mode=mode,
                previous_revision_id=previous,
                **extra,
            )
            logger.info(
                "Save decided — content=%s actor=%s mode=%s outcome=%s reason=%s revision=%s",
                item.id,
                actor.id,
                mode,
                outcome,
                reason,
                decision.revision_id,
            )
            return decision

        if self._blocks(mode, can_approve):
            return result(SaveOutcome.REJECTED, DecisionReason.LOCKED)

        await self._markers.mark(item.id, actor.id)

        if mode != EditingMode.OPEN and not can_approve:
            return result(SaveOutcome.PENDING, DecisionReason.APPROVAL_REQUIRED)

        if save_as_pending:
            return result(SaveOutcome.PENDING, DecisionReason.SAVED_AS_PENDING)

        revision = await self._detector.latest_revision(item, author_id=actor.id)
        if revision is None:
            # Nothing to accept; the marker stays until it expires or is consumed
            logger.warning(
                "No revision by actor to accept, pointer unchanged — content=%s actor=%s",
                item.id,
                actor.id,
            )
            return result(SaveOutcome.ACCEPTED, DecisionReason.APPROVED)

        updated = await self._pointers.compare_and_set(item.id, previous, revision.id)
        if not updated:
            logger.warning(
                "Accepted pointer changed concurrently, not overwritten — content=%s expected=%s revision=%s",
                item.id,
                previous,
                revision.id,
            )
        await self._markers.clear(item.id, actor.id)
        return result(
            SaveOutcome.ACCEPTED,
            DecisionReason.APPROVED,
            revision_id=revision.id,
            pointer_updated=updated,
        )
