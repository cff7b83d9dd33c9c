"""Errors raised while resolving and decoding webhook events."""

from __future__ import annotations

# Decoder messages can echo large payload fragments
_DETAIL_PREVIEW_LIMIT = 200


class WebhookEventError(Exception):
    """Base class for event lookup and decoding failures."""


class UnsupportedEventTypeError(WebhookEventError):
    """Raised when a wire event name has no matching ``EventType``.

    Attributes
    ----------
    event_name
        The event name exactly as it appeared in the request header.

    """

    def __init__(self, event_name: str) -> None:
        """Initialise with the rejected wire event name."""
        self.event_name = event_name
        super().__init__(f"Unsupported event type {event_name}")


class EventDecodeError(WebhookEventError):
    """Raised when an authenticated body cannot be decoded into an ``Event``.

    This is deliberately unrelated to signature verification so callers can
    tell malformed payloads apart from untrusted ones.
    """

    @classmethod
    def from_decoder(cls, detail: str) -> EventDecodeError:
        """Wrap a msgspec decoder message, truncating very long details."""
        if len(detail) > _DETAIL_PREVIEW_LIMIT:
            detail = detail[:_DETAIL_PREVIEW_LIMIT] + "..."
        return cls(detail)


__all__ = ["EventDecodeError", "UnsupportedEventTypeError", "WebhookEventError"]
