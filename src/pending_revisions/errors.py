"""Errors surfaced to callers of the decision services."""

from __future__ import annotations


class NotFoundError(LookupError):
    """A content item or revision id does not exist."""

    def __init__(self, kind: str, identifier: str) -> None:
        super().__init__(f"{kind} not found: {identifier}")
        self.kind = kind
        self.identifier = identifier
