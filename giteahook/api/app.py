"""Application factory for the giteahook Falcon ASGI application.

Usage
-----
Create a probe-only app (no webhook mounted)::

    app = create_app()

Create an app that accepts deliveries::

    from giteahook.api.app import AppDependencies, create_app

    async def on_success(event_type, event, resp, req):
        ...

    app = create_app(AppDependencies(secret="s3cret", on_success=on_success))

Mount the webhook on an app you already have::

    register_webhook(app, secret="s3cret", on_success=on_success)

"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

import falcon.asgi

from giteahook.api.errors import WebhookRejectedError, handle_webhook_rejected
from giteahook.api.health.resources import HealthResource, ReadyResource
from giteahook.api.webhook.middleware import WebhookMethodGuard
from giteahook.api.webhook.resources import WebhookResource

if typ.TYPE_CHECKING:
    from giteahook.api.webhook.resources import WebhookDispatcher

__all__ = ["DEFAULT_WEBHOOK_PATH", "AppDependencies", "create_app", "register_webhook"]

DEFAULT_WEBHOOK_PATH = "/webhook"


@dc.dataclass(frozen=True, slots=True)
class AppDependencies:
    """Dependencies for mounting the webhook resource.

    Attributes
    ----------
    secret
        Shared secret deliveries are signed with.
    on_success
        Dispatch callback for validated events.
    webhook_path
        Route the webhook resource is mounted on.

    """

    secret: str | bytes
    on_success: WebhookDispatcher
    webhook_path: str = DEFAULT_WEBHOOK_PATH


def register_webhook(
    app: falcon.asgi.App,
    *,
    secret: str | bytes,
    on_success: WebhookDispatcher,
    path: str = DEFAULT_WEBHOOK_PATH,
) -> WebhookResource:
    """Mount a :class:`WebhookResource` with its method guard and error handler.

    Returns
    -------
    WebhookResource
        The mounted resource.

    """
    resource = WebhookResource(secret, on_success)
    app.add_middleware(WebhookMethodGuard())
    app.add_route(path, resource)
    app.add_error_handler(WebhookRejectedError, handle_webhook_rejected)
    return resource


def create_app(
    dependencies: AppDependencies | None = None,
) -> falcon.asgi.App:
    """Create and configure the Falcon ASGI application.

    ``/health`` and ``/ready`` are always registered. The webhook route is
    only mounted when ``dependencies`` is provided; without it ``/ready``
    reports 503.

    Parameters
    ----------
    dependencies
        Optional webhook dependencies.

    Returns
    -------
    falcon.asgi.App
        Configured Falcon ASGI application.

    """
    app = falcon.asgi.App()

    webhook_path = dependencies.webhook_path if dependencies is not None else None
    app.add_route("/health", HealthResource())
    app.add_route("/ready", ReadyResource(webhook_path=webhook_path))

    if dependencies is not None:
        register_webhook(
            app,
            secret=dependencies.secret,
            on_success=dependencies.on_success,
            path=dependencies.webhook_path,
        )

    return app
