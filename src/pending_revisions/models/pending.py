"""Read models produced by pending revision detection."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel


class AcceptedBaseline(BaseModel):
    """The accepted revision used as the pending baseline.

    ``is_implicit`` is set when the item itself stands in for the accepted
    revision (no pointer, or a dangling one).
    """

    revision_id: str
    created_at: datetime
    is_implicit: bool = False


class DiffTarget(BaseModel):
    accepted_id: str
    latest_pending_id: str


class PendingSummary(BaseModel):
    content_id: str
    count: int = 0
    diff: DiffTarget | None = None


class RevisionState(BaseModel):
    """Per-revision flags for the revision browser."""

    revision_id: str
    current: bool = False
    pending: bool = False
