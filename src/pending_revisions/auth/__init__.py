"""Session authentication for the HTTP surface."""

from pending_revisions.auth.middleware import current_actor, get_user, require_authenticated_user

__all__ = ["current_actor", "get_user", "require_authenticated_user"]
