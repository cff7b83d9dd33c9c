"""Webhook ingestion resource.

A delivery is validated in a fixed order and the first failing step ends the
request with HTTP 400:

1. the method is POST (enforced by
   :class:`~giteahook.api.webhook.middleware.WebhookMethodGuard`);
2. ``Content-Type`` is ``application/json`` (case-insensitive);
3. ``X-Gitea-Event`` is present;
4. the event name is a supported kind;
5. ``X-Gitea-Signature`` is present;
6. the body can be read;
7. the signature matches the HMAC-SHA256 of the raw body;
8. the body decodes into an :class:`~giteahook.events.models.Event`.

Cheap header checks run before the HMAC, and the HMAC runs before any JSON
decoding, so unsigned bodies never reach the decoder. On success the dispatch
callback receives ``(event_type, event, resp, req)`` and owns the response
from then on; if it writes nothing Falcon's default 200 is returned.

The resource keeps no per-request state. The secret and callback are set at
construction and only read afterwards, so one instance can serve concurrent
requests.
"""

from __future__ import annotations

import inspect
import typing as typ

from giteahook.api.errors import WebhookRejectedError
from giteahook.events import (
    EventDecodeError,
    UnsupportedEventTypeError,
    decode_event,
    event_type_for,
)
from giteahook.logging import get_logger, log_info
from giteahook.signature import SIGNATURE_HEADER, verify_signature

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from falcon.asgi import Request, Response

    from giteahook.events import Event, EventType

__all__ = ["EVENT_HEADER", "WebhookDispatcher", "WebhookResource"]

logger = get_logger(__name__)

EVENT_HEADER = "X-Gitea-Event"
_JSON_CONTENT_TYPE = "application/json"

WebhookDispatcher = typ.Callable[
    ["EventType", "Event", "Response", "Request"],
    "cabc.Awaitable[None] | None",
]


class WebhookResource:
    """Validate webhook deliveries and hand verified events to a callback.

    Parameters
    ----------
    secret
        Shared secret the server signs deliveries with.
    on_success
        Callback invoked with ``(event_type, event, resp, req)`` once a
        delivery is fully validated. It may be a plain function or a
        coroutine function.

    """

    def __init__(self, secret: str | bytes, on_success: WebhookDispatcher) -> None:
        """Store the shared secret and dispatch callback."""
        self._secret = secret.encode("utf-8") if isinstance(secret, str) else secret
        self._on_success = on_success

    async def on_post(self, req: Request, resp: Response) -> None:
        """Handle POST deliveries.

        Raises
        ------
        WebhookRejectedError
            At the first failed validation step.

        """
        self._check_content_type(req)
        event_type = self._resolve_event_type(req)

        signature = req.get_header(SIGNATURE_HEADER)
        if not signature:
            raise WebhookRejectedError.missing_signature()

        body = await self._read_body(req)
        if not verify_signature(self._secret, body, signature):
            raise WebhookRejectedError.invalid_signature()

        try:
            event = decode_event(body)
        except EventDecodeError as exc:
            raise WebhookRejectedError.undecodable_body(exc) from exc

        log_info(
            logger,
            "Accepted %s delivery for %s",
            event_type.display_name,
            event.repository.full_name or "<unknown repository>",
        )
        result = self._on_success(event_type, event, resp, req)
        if inspect.isawaitable(result):
            await result

    @staticmethod
    def _check_content_type(req: Request) -> None:
        content_type = (req.content_type or "").strip().lower()
        if content_type != _JSON_CONTENT_TYPE:
            raise WebhookRejectedError.invalid_content_type()

    @staticmethod
    def _resolve_event_type(req: Request) -> EventType:
        event_name = req.get_header(EVENT_HEADER)
        if not event_name:
            raise WebhookRejectedError.missing_event_header()
        try:
            return event_type_for(event_name)
        except UnsupportedEventTypeError as exc:
            raise WebhookRejectedError.unsupported_event(str(exc)) from exc

    @staticmethod
    async def _read_body(req: Request) -> bytes:
        try:
            return await req.stream.read()
        except OSError as exc:
            raise WebhookRejectedError.unreadable_body(exc) from exc
