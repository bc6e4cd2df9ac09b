"""Repository modules for each Cosmos DB container."""

from pending_revisions.database.repositories.content import ContentRepository
from pending_revisions.database.repositories.grants import GrantRepository
from pending_revisions.database.repositories.markers import MarkerRepository
from pending_revisions.database.repositories.pointers import PointerRepository
from pending_revisions.database.repositories.policies import PolicyRepository
from pending_revisions.database.repositories.revisions import RevisionRepository

__all__ = [
    "ContentRepository",
    "GrantRepository",
    "MarkerRepository",
    "PointerRepository",
    "PolicyRepository",
    "RevisionRepository",
]
