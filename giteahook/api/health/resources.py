"""Liveness and readiness probes for the webhook receiver.

Liveness always succeeds while the process can serve requests. Readiness
reports whether a webhook route has been mounted, so an orchestrator does
not route deliveries to an instance started without a secret.

Usage
-----
Register the probes on the Falcon app::

    from giteahook.api.health.resources import HealthResource, ReadyResource

    app.add_route("/health", HealthResource())
    app.add_route("/ready", ReadyResource(webhook_path="/webhook"))

"""

from __future__ import annotations

import typing as typ
from http import HTTPStatus

if typ.TYPE_CHECKING:
    from falcon.asgi import Request, Response

__all__ = ["HealthResource", "ReadyResource"]


class HealthResource:
    """Liveness probe returning ``{"status": "ok"}``."""

    async def on_get(self, _req: Request, resp: Response) -> None:
        """Handle GET /health requests."""
        resp.media = {"status": "ok"}
        resp.status = HTTPStatus.OK


class ReadyResource:
    """Readiness probe reflecting whether deliveries can be accepted.

    Parameters
    ----------
    webhook_path
        Route of the mounted webhook resource, or ``None`` when the app was
        built without one.

    """

    def __init__(self, webhook_path: str | None = None) -> None:
        """Record the mounted webhook route."""
        self._webhook_path = webhook_path

    async def on_get(self, _req: Request, resp: Response) -> None:
        """Handle GET /ready requests.

        Responds 200 with ``{"status": "ready", "webhook": <path>}`` when a
        webhook is mounted, otherwise 503 with ``{"status": "unconfigured"}``.
        """
        if self._webhook_path is None:
            resp.media = {"status": "unconfigured"}
            resp.status = HTTPStatus.SERVICE_UNAVAILABLE
            return
        resp.media = {"status": "ready", "webhook": self._webhook_path}
        resp.status = HTTPStatus.OK
