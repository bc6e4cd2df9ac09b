"""Stored editing-mode policy documents."""

from __future__ import annotations

from enum import StrEnum

from pending_revisions.models.base import DocumentBase


class PolicyScope(StrEnum):
    CONTENT_TYPE = "content_type"
    ITEM = "item"


def policy_id(scope: PolicyScope, target: str) -> str:
    return f"{scope.value}:{target}"


class EditingPolicy(DocumentBase):
    """A raw editing-mode setting for a content type or a single item.

    ``mode`` is kept as the stored string; validation happens on read.
    """

    scope: PolicyScope
    target: str
    mode: str = ""
