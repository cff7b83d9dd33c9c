"""Method guard for the webhook route.

Falcon answers methods a resource does not implement with its own error
responses: 405 with a JSON body for methods it knows (TRACE, PROPFIND, ...)
and 400 with a JSON body for methods it does not. A webhook route answers
every method other than POST with an empty 400 instead, so this middleware
rejects those requests before any responder runs.

Usage
-----
:func:`giteahook.api.app.register_webhook` installs the guard. To wire it by
hand::

    app = falcon.asgi.App(middleware=[WebhookMethodGuard()])
    app.add_route("/webhook", WebhookResource(secret, on_success))
    app.add_error_handler(WebhookRejectedError, handle_webhook_rejected)

"""

from __future__ import annotations

import typing as typ

from giteahook.api.errors import WebhookRejectedError
from giteahook.api.webhook.resources import WebhookResource

if typ.TYPE_CHECKING:
    from falcon.asgi import Request, Response

__all__ = ["WebhookMethodGuard"]

_ALLOWED_METHOD = "POST"


class WebhookMethodGuard:
    """Falcon middleware rejecting non-POST requests to webhook routes.

    Requests routed to any other resource, or to no resource at all, pass
    through untouched.
    """

    async def process_resource(
        self,
        req: Request,
        _resp: Response,
        resource: object,
        _params: dict[str, typ.Any],
    ) -> None:
        """Raise :class:`WebhookRejectedError` for non-POST webhook requests.

        Parameters
        ----------
        req
            Incoming request.
        _resp
            Falcon response (unused).
        resource
            The routed resource, or ``None`` when no route matched.
        _params
            Route parameters (unused).

        """
        if isinstance(resource, WebhookResource) and req.method != _ALLOWED_METHOD:
            raise WebhookRejectedError.method_not_allowed()
