"""Falcon resource receiving signed webhook deliveries.

Usage
-----
Mount the resource, its method guard and its error handler on an existing
app with :func:`giteahook.api.app.register_webhook`::

    from giteahook.api import register_webhook

    register_webhook(app, secret=secret, on_success=on_success)
"""

from giteahook.api.webhook.middleware import WebhookMethodGuard
from giteahook.api.webhook.resources import (
    EVENT_HEADER,
    WebhookDispatcher,
    WebhookResource,
)

__all__ = [
    "EVENT_HEADER",
    "WebhookDispatcher",
    "WebhookMethodGuard",
    "WebhookResource",
]
