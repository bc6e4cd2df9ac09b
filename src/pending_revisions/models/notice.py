"""Advisory notice selection for a viewer of a content item."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel


class NoticeKind(StrEnum):
    NONE = "none"
    JUST_FILED_AS_PENDING = "just_filed_as_pending"
    REQUIRES_APPROVAL = "requires_approval"
    LOCKED = "locked"
    DIVERGED_FROM_ACCEPTED = "diverged_from_accepted"


class Notice(BaseModel):
    """The single notice that applies to one view. Message text is external."""

    kind: NoticeKind = NoticeKind.NONE
    target_revision_id: str | None = None
    diff_from: str | None = None
    diff_to: str | None = None
    viewer_can_approve: bool = False
