"""Receive signed Gitea webhooks and report commit statuses back."""

from __future__ import annotations

from giteahook.api import AppDependencies, create_app, register_webhook
from giteahook.events import Event, EventType, decode_event, event_type_for
from giteahook.signature import compute_signature, verify_signature
from giteahook.status import (
    CommitStatusState,
    CreateStatusOption,
    GiteaAPIConfig,
    GiteaAPIError,
    GiteaStatusClient,
)

__all__ = [
    "AppDependencies",
    "CommitStatusState",
    "CreateStatusOption",
    "Event",
    "EventType",
    "GiteaAPIConfig",
    "GiteaAPIError",
    "GiteaStatusClient",
    "compute_signature",
    "create_app",
    "decode_event",
    "event_type_for",
    "register_webhook",
    "verify_signature",
]
