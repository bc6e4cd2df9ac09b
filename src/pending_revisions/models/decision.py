"""Typed results of a save decision."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel

from pending_revisions.models.editing_mode import EditingMode


class SaveOutcome(StrEnum):
    REJECTED = "rejected"
    ACCEPTED = "accepted"
    PENDING = "pending"


class DecisionReason(StrEnum):
    """Which rule of the save state machine produced the outcome."""

    LOCKED = "locked"
    APPROVAL_REQUIRED = "approval_required"
    SAVED_AS_PENDING = "saved_as_pending"
    APPROVED = "approved"


class SaveDecision(BaseModel):
    """The outcome of one save attempt.

    ``revision_id`` is the newly accepted revision for accepted saves and may
    be None when no qualifying revision was found. ``previous_revision_id``
    is the pointer value read before the decision.
    """

    outcome: SaveOutcome
    reason: DecisionReason
    content_id: str
    actor_id: str
    editing_mode: EditingMode
    revision_id: str | None = None
    previous_revision_id: str | None = None
    pointer_updated: bool = False

    @property
    def persisted(self) -> bool:
        return self.outcome != SaveOutcome.REJECTED
