"""Editing affordances for a viewer: submit label, save-as-pending, mode switch."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pending_revisions.models.content import ContentStatus
from pending_revisions.models.controls import EditorControls, SubmitAction
from pending_revisions.models.editing_mode import ITEM_SELECTABLE_MODES, EditingMode

if TYPE_CHECKING:
    from pending_revisions.models.actor import Actor
    from pending_revisions.models.content import ContentItem
    from pending_revisions.services.access import AccessGate
    from pending_revisions.services.editing_mode import EditingModeResolver


class EditorControlsBuilder:
    def __init__(self, resolver: EditingModeResolver, gate: AccessGate) -> None:
        self._resolver = resolver
        self._gate = gate

    async def controls_for(self, item: ContentItem, actor: Actor) -> EditorControls:
        """Derive which editing controls apply to ``actor`` on ``item``.

        Capable actors on published items of an enabled type may save as
        pending instead of publishing. Incapable actors see "suggest edit" in
        approval-required mode and no submit action at all when locked.
        """
        enabled = await self._resolver.is_enabled(item.content_type)
        mode = await self._resolver.resolve(item)
        can_approve = await self._gate.can_approve(actor, item)
        published = item.status == ContentStatus.PUBLISHED

        submit_action = SubmitAction.UPDATE
        if not can_approve:
            if mode == EditingMode.LOCKED:
                submit_action = SubmitAction.HIDDEN
            elif mode == EditingMode.APPROVAL_REQUIRED and published:
                submit_action = SubmitAction.SUGGEST_EDIT

        can_change_mode = enabled and can_approve
        return EditorControls(
            content_id=item.id,
            editing_mode=mode,
            can_approve=can_approve,
            submit_action=submit_action,
            show_save_as_pending=enabled and published and can_approve,
            can_change_mode=can_change_mode,
            mode_choices=list(ITEM_SELECTABLE_MODES) if can_change_mode else [],
        )
