"""giteahook runtime entrypoint for container deployments.

This module provides the ASGI application factory used by Granian. It
delegates to :func:`giteahook.api.app.create_app` while keeping the
``giteahook.runtime:create_app`` entrypoint stable.

When ``GITEAHOOK_WEBHOOK_SECRET`` is set the webhook route is mounted and
validated events are handed to the callable named by ``GITEAHOOK_DISPATCHER``
(or only logged when that is unset). Without a secret the service starts
with probes only and ``/ready`` reports 503.

Configuration is driven by environment variables:

- ``GITEAHOOK_HOST``: Bind address (default ``0.0.0.0``)
- ``GITEAHOOK_PORT``: Listen port (default ``8080``)
- ``GITEAHOOK_LOG_LEVEL``: Log level (default ``INFO``)
- ``GITEAHOOK_WEBHOOK_SECRET``, ``GITEAHOOK_WEBHOOK_PATH``,
  ``GITEAHOOK_DISPATCHER``: see :class:`giteahook.config.WebhookConfig`

Run the service directly with ``python -m giteahook.runtime``.
"""

from __future__ import annotations

import importlib
import os
import typing as typ

from giteahook.config import WebhookConfig, WebhookConfigError
from giteahook.logging import (
    configure_logging,
    get_logger,
    log_error,
    log_info,
    log_warning,
)

if typ.TYPE_CHECKING:
    import falcon.asgi
    from falcon.asgi import Request, Response

    from giteahook.api.webhook.resources import WebhookDispatcher
    from giteahook.events import Event, EventType

__all__ = ["create_app", "load_dispatcher", "log_event", "main"]

logger = get_logger(__name__)

# TCP port number range limits
_MIN_PORT = 1
_MAX_PORT = 65535


def _parse_port(port_str: str) -> int:
    """Parse and validate a port number string.

    Raises
    ------
    SystemExit
        If port_str is not a valid integer in range 1-65535.

    """
    try:
        port = int(port_str)
        if not (_MIN_PORT <= port <= _MAX_PORT):
            msg = f"port {port} outside valid range {_MIN_PORT}-{_MAX_PORT}"
            raise ValueError(msg)  # noqa: TRY301 - unify conversion and range errors
    except ValueError as exc:
        log_error(
            logger,
            "Invalid GITEAHOOK_PORT value: %r (must be %d-%d): %s",
            port_str,
            _MIN_PORT,
            _MAX_PORT,
            exc,
        )
        raise SystemExit(1) from exc
    return port


async def log_event(
    event_type: EventType,
    event: Event,
    _resp: Response,
    _req: Request,
) -> None:
    """Dispatch callback used when no dispatcher is configured.

    Logs the delivery and leaves the response untouched, so the server
    receives Falcon's default 200.
    """
    log_info(
        logger,
        "Received %s event for %s (ref=%r, pull_request=%d)",
        event_type.display_name,
        event.repository.full_name,
        event.ref,
        event.pull_request.number,
    )


def load_dispatcher(reference: str) -> WebhookDispatcher:
    """Import the callable named by a ``package.module:attribute`` reference.

    Raises
    ------
    WebhookConfigError
        If the reference is malformed or does not name a callable.
    ImportError
        If the module cannot be imported.

    """
    module_name, _, attr = reference.partition(":")
    if not module_name or not attr:
        raise WebhookConfigError.invalid_dispatcher(reference)

    module = importlib.import_module(module_name)
    dispatcher = getattr(module, attr, None)
    if not callable(dispatcher):
        raise WebhookConfigError.invalid_dispatcher(reference)
    return typ.cast("WebhookDispatcher", dispatcher)


def create_app() -> falcon.asgi.App:
    """Create the Falcon ASGI application from the environment.

    Returns
    -------
    falcon.asgi.App
        App with probes and, when a secret is configured, the webhook route.

    """
    from giteahook.api.app import AppDependencies
    from giteahook.api.app import create_app as _create_api_app

    if not os.environ.get("GITEAHOOK_WEBHOOK_SECRET"):
        log_warning(
            logger,
            "GITEAHOOK_WEBHOOK_SECRET is not set; starting without a webhook route",
        )
        return _create_api_app()

    config = WebhookConfig.from_env()
    dispatcher = (
        load_dispatcher(config.dispatcher)
        if config.dispatcher is not None
        else log_event
    )
    log_info(logger, "Mounting webhook receiver on %s", config.path)
    return _create_api_app(
        AppDependencies(
            secret=config.secret,
            on_success=dispatcher,
            webhook_path=config.path,
        )
    )


def main() -> None:
    """Start the giteahook runtime server using Granian.

    Reads ``GITEAHOOK_HOST``, ``GITEAHOOK_PORT``, and ``GITEAHOOK_LOG_LEVEL``
    from the environment and starts the ASGI server.
    """
    from granian import Granian
    from granian.constants import Interfaces

    host = os.environ.get("GITEAHOOK_HOST", "0.0.0.0")  # noqa: S104 - bind all interfaces for container
    port = _parse_port(os.environ.get("GITEAHOOK_PORT", "8080"))
    log_level_str = os.environ.get("GITEAHOOK_LOG_LEVEL", "INFO")

    normalized_level, invalid_level = configure_logging(log_level_str)
    if invalid_level:
        log_warning(
            logger,
            "Invalid GITEAHOOK_LOG_LEVEL %r, falling back to %s",
            log_level_str,
            normalized_level,
        )

    log_info(
        logger,
        "Starting giteahook runtime on %s:%d (log_level=%s)",
        host,
        port,
        normalized_level,
    )

    server = Granian(
        "giteahook.runtime:create_app",
        address=host,
        port=port,
        interface=Interfaces.ASGI,
        factory=True,
    )
    server.serve()


if __name__ == "__main__":
    main()
