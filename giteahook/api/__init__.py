"""giteahook HTTP layer.

This package provides the Falcon Asynchronous Server Gateway Interface
(ASGI) application that receives signed webhook deliveries, plus the
health probes the runtime exposes alongside it.

Public API
----------
create_app
    Application factory; mounts the webhook route when dependencies are
    supplied.
register_webhook
    Mount the webhook resource and its error handler on an existing app.
"""

from giteahook.api.app import AppDependencies, create_app, register_webhook

__all__ = ["AppDependencies", "create_app", "register_webhook"]
