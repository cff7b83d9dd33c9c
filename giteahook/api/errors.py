"""Webhook rejection errors and their Falcon error handler.

Every failed validation step in :class:`~giteahook.api.webhook.resources.
WebhookResource` and :class:`~giteahook.api.webhook.middleware.
WebhookMethodGuard` raises :class:`WebhookRejectedError`. The handler turns it
into an HTTP 400 with a short plain-text diagnostic, so no partially
validated request ever reaches the dispatch callback.

Usage
-----
Register the handler on the Falcon app::

    from giteahook.api.errors import WebhookRejectedError, handle_webhook_rejected

    app.add_error_handler(WebhookRejectedError, handle_webhook_rejected)

"""

from __future__ import annotations

import typing as typ

import falcon

from giteahook.logging import get_logger, log_warning

if typ.TYPE_CHECKING:
    from falcon.asgi import Request, Response

__all__ = ["WebhookRejectedError", "handle_webhook_rejected"]

logger = get_logger(__name__)


class WebhookRejectedError(Exception):
    """Raised when a webhook request fails validation.

    Attributes
    ----------
    reason
        Diagnostic text written to the response body. ``None`` produces an
        empty body.

    """

    def __init__(self, reason: str | None = None) -> None:
        """Initialise with an optional diagnostic."""
        self.reason = reason
        super().__init__(reason or "webhook request rejected")

    @classmethod
    def method_not_allowed(cls) -> WebhookRejectedError:
        """Return an error for any method other than POST."""
        return cls()

    @classmethod
    def invalid_content_type(cls) -> WebhookRejectedError:
        """Return an error for a missing or non-JSON content type."""
        return cls("Invalid content type")

    @classmethod
    def missing_event_header(cls) -> WebhookRejectedError:
        """Return an error when the event-name header is absent."""
        return cls("No event header specified")

    @classmethod
    def unsupported_event(cls, detail: str) -> WebhookRejectedError:
        """Return an error naming an unsupported event type."""
        return cls(detail)

    @classmethod
    def missing_signature(cls) -> WebhookRejectedError:
        """Return an error when the signature header is absent."""
        return cls("No signature header specified")

    @classmethod
    def unreadable_body(cls, exc: BaseException) -> WebhookRejectedError:
        """Return an error for an I/O failure while reading the body."""
        return cls(f"Could not read body: {exc}")

    @classmethod
    def invalid_signature(cls) -> WebhookRejectedError:
        """Return an error when the body signature does not match."""
        return cls("Could not validate signature of body")

    @classmethod
    def undecodable_body(cls, exc: BaseException) -> WebhookRejectedError:
        """Return an error for an authenticated body that fails to decode."""
        return cls(f"Could not decode body: {exc}")


async def handle_webhook_rejected(
    req: Request,
    resp: Response,
    ex: WebhookRejectedError,
    _params: dict[str, typ.Any],
) -> None:
    """Map ``WebhookRejectedError`` to an HTTP 400 plain-text response.

    Parameters
    ----------
    req
        Falcon request, used for the log line only.
    resp
        Falcon response whose status and body are set.
    ex
        The rejection carrying the diagnostic text.
    _params
        URI template parameters (unused).

    """
    log_warning(
        logger,
        "Rejected webhook %s %s: %s",
        req.method,
        req.path,
        ex.reason or "method not allowed",
    )
    resp.status = falcon.HTTP_400
    resp.content_type = falcon.MEDIA_TEXT
    resp.text = ex.reason or ""
