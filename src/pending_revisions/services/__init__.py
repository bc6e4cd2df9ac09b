"""Decision services over the content, policy, pointer and marker stores."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from pending_revisions.services.access import AccessGate
from pending_revisions.services.controls import EditorControlsBuilder
from pending_revisions.services.decisions import SaveDecisionEngine
from pending_revisions.services.editing_mode import EditingModeResolver
from pending_revisions.services.markers import DEFAULT_TTL_SECONDS, PendingMarkers
from pending_revisions.services.notifications import NotificationContextBuilder
from pending_revisions.services.pending import PendingRevisionDetector

if TYPE_CHECKING:
    from pending_revisions.stores import (
        AuthorizationProvider,
        ContentStore,
        EphemeralStore,
        PointerStore,
        PolicyStore,
    )


@dataclass(frozen=True)
class Services:
    """The wired set of decision services sharing one gate and one resolver."""

    contents: ContentStore
    resolver: EditingModeResolver
    gate: AccessGate
    detector: PendingRevisionDetector
    markers: PendingMarkers
    engine: SaveDecisionEngine
    notices: NotificationContextBuilder
    controls: EditorControlsBuilder


def build_services(
    *,
    contents: ContentStore,
    policies: PolicyStore,
    pointers: PointerStore,
    ephemeral: EphemeralStore,
    authorization: AuthorizationProvider,
    marker_ttl_seconds: int = DEFAULT_TTL_SECONDS,
) -> Services:
    resolver = EditingModeResolver(policies)
    gate = AccessGate(authorization)
    detector = PendingRevisionDetector(contents, pointers)
    markers = PendingMarkers(ephemeral, marker_ttl_seconds)
    return Services(
        contents=contents,
        resolver=resolver,
        gate=gate,
        detector=detector,
        markers=markers,
        engine=SaveDecisionEngine(resolver, gate, detector, contents, pointers, markers),
        notices=NotificationContextBuilder(resolver, gate, detector, markers),
        controls=EditorControlsBuilder(resolver, gate),
    )


__all__ = [
    "AccessGate",
    "EditingModeResolver",
    "EditorControlsBuilder",
    "NotificationContextBuilder",
    "PendingMarkers",
    "PendingRevisionDetector",
    "SaveDecisionEngine",
    "Services",
    "build_services",
]
