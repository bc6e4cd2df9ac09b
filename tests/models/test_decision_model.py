"""Tests for SaveDecision serialization."""

from pending_revisions.models.decision import DecisionReason, SaveDecision, SaveOutcome
from pending_revisions.models.editing_mode import EditingMode


def test_rejected_is_not_persisted() -> None:
    decision = SaveDecision(
        outcome=SaveOutcome.REJECTED,
        reason=DecisionReason.LOCKED,
        content_id="post-1",
        actor_id="alice",
        editing_mode=EditingMode.LOCKED,
    )

    assert decision.persisted is False
    assert decision.model_dump(mode="json")["outcome"] == "rejected"
    assert decision.revision_id is None


def test_pending_is_persisted() -> None:
    decision = SaveDecision(
        outcome=SaveOutcome.PENDING,
        reason=DecisionReason.SAVED_AS_PENDING,
        content_id="post-1",
        actor_id="alice",
        editing_mode=EditingMode.OPEN,
    )

    assert decision.persisted is True
