"""Data models for Cosmos DB document types and decision results."""

from pending_revisions.models.actor import Actor
from pending_revisions.models.content import ContentItem, ContentStatus
from pending_revisions.models.controls import EditorControls, SubmitAction
from pending_revisions.models.decision import DecisionReason, SaveDecision, SaveOutcome
from pending_revisions.models.editing_mode import ITEM_SELECTABLE_MODES, EditingMode
from pending_revisions.models.grant import ACCEPT_REVISIONS, Grant
from pending_revisions.models.notice import Notice, NoticeKind
from pending_revisions.models.pending import AcceptedBaseline, DiffTarget, PendingSummary, RevisionState
from pending_revisions.models.pointer import AcceptedPointer
from pending_revisions.models.policy import EditingPolicy, PolicyScope
from pending_revisions.models.revision import Revision

__all__ = [
    "ACCEPT_REVISIONS",
    "ITEM_SELECTABLE_MODES",
    "AcceptedBaseline",
    "AcceptedPointer",
    "Actor",
    "ContentItem",
    "ContentStatus",
    "DecisionReason",
    "DiffTarget",
    "EditingMode",
    "EditingPolicy",
    "EditorControls",
    "Grant",
    "Notice",
    "NoticeKind",
    "PendingSummary",
    "PolicyScope",
    "Revision",
    "RevisionState",
    "SaveDecision",
    "SaveOutcome",
    "SubmitAction",
]
