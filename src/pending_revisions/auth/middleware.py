"""Authentication helpers — resolve the acting user from the session."""

from __future__ import annotations

from typing import Any

from fastapi import HTTPException, Request, status

from pending_revisions.models.actor import Actor


def get_user(request: Request) -> dict[str, Any] | None:
    """Extract the authenticated user from the session, if present."""
    return request.session.get("user") if hasattr(request, "session") else None


def require_authenticated_user(request: Request) -> dict[str, Any]:
    """Return the authenticated user or raise HTTP 401."""
    user = get_user(request)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )
    return user


def current_actor(request: Request) -> Actor:
    """Build the Actor for the session user; the id claim is required."""
    user = require_authenticated_user(request)
    actor_id = user.get("oid") or user.get("id")
    if not actor_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Session user has no identifier",
        )
    return Actor(id=str(actor_id), name=str(user.get("name", "")))
