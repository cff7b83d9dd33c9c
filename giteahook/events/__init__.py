"""Webhook event kinds, payload records and decoding.

Usage
-----
Resolve the event-name header and decode a verified body::

    from giteahook.events import decode_event, event_type_for

    event_type = event_type_for(req.get_header("X-Gitea-Event"))
    event = decode_event(body)

"""

from __future__ import annotations

from .decoding import decode_event, encode_event
from .errors import EventDecodeError, UnsupportedEventTypeError, WebhookEventError
from .kinds import WIRE_EVENT_TYPES, EventType, event_type_for
from .models import (
    Commit,
    Event,
    GitUser,
    Label,
    PullRequest,
    Ref,
    Repository,
    RepositoryInternalTracker,
    RepositoryPermissions,
    User,
)

__all__ = [
    "WIRE_EVENT_TYPES",
    "Commit",
    "Event",
    "EventDecodeError",
    "EventType",
    "GitUser",
    "Label",
    "PullRequest",
    "Ref",
    "Repository",
    "RepositoryInternalTracker",
    "RepositoryPermissions",
    "UnsupportedEventTypeError",
    "User",
    "WebhookEventError",
    "decode_event",
    "encode_event",
    "event_type_for",
]
