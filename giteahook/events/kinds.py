"""Supported webhook event kinds and the wire-name lookup.

The server names the event kind in the ``X-Gitea-Event`` header. Only the
names in :data:`WIRE_EVENT_TYPES` are accepted; anything else is rejected
rather than mapped to a fallback kind.

Usage
-----
>>> event_type_for("pull_request")
<EventType.PULL_REQUEST: 'pull_request'>
>>> EventType.PULL_REQUEST.display_name
'pull request'

"""

from __future__ import annotations

import enum
import types
import typing as typ

from .errors import UnsupportedEventTypeError

if typ.TYPE_CHECKING:
    import collections.abc as cabc


class EventType(enum.Enum):
    """Internal tag for a supported webhook event kind.

    Member values are the wire names, but routing must go through
    :func:`event_type_for` so that the accepted set stays explicit.
    """

    PUSH = "push"
    PULL_REQUEST = "pull_request"

    @property
    def display_name(self) -> str:
        """Human-readable name for logs and diagnostics only."""
        return _DISPLAY_NAMES.get(self, "unknown")

    @property
    def relevant_fields(self) -> frozenset[str]:
        """Names of the ``Event`` fields populated for this kind."""
        return _RELEVANT_FIELDS.get(self, frozenset())

    def __str__(self) -> str:
        """Return :attr:`display_name`."""
        return self.display_name


WIRE_EVENT_TYPES: cabc.Mapping[str, EventType] = types.MappingProxyType(
    {
        "push": EventType.PUSH,
        "pull_request": EventType.PULL_REQUEST,
    }
)

_DISPLAY_NAMES: cabc.Mapping[EventType, str] = types.MappingProxyType(
    {
        EventType.PUSH: "push",
        EventType.PULL_REQUEST: "pull request",
    }
)

# ``Event`` is a flat record; these are the fields each kind fills in.
_RELEVANT_FIELDS: cabc.Mapping[EventType, frozenset[str]] = types.MappingProxyType(
    {
        EventType.PUSH: frozenset(
            {
                "secret",
                "ref",
                "before",
                "after",
                "compare_url",
                "commits",
                "repository",
                "pusher",
                "sender",
            }
        ),
        EventType.PULL_REQUEST: frozenset(
            {
                "secret",
                "action",
                "number",
                "pull_request",
                "repository",
                "sender",
            }
        ),
    }
)


def event_type_for(event_name: str) -> EventType:
    """Resolve a wire event name to its ``EventType``.

    Parameters
    ----------
    event_name
        Value of the event-name request header. Matching is exact.

    Returns
    -------
    EventType
        The corresponding event kind.

    Raises
    ------
    UnsupportedEventTypeError
        If ``event_name`` is not a supported wire name.

    """
    try:
        return WIRE_EVENT_TYPES[event_name]
    except KeyError:
        raise UnsupportedEventTypeError(event_name) from None


__all__ = ["WIRE_EVENT_TYPES", "EventType", "event_type_for"]
