"""Configuration for the webhook receiver.

Usage
-----
>>> import os
>>> os.environ["GITEAHOOK_WEBHOOK_SECRET"] = "123456"
>>> config = WebhookConfig.from_env()
>>> config.path
'/webhook'

"""

from __future__ import annotations

import dataclasses as dc
import os

_DEFAULT_PATH = "/webhook"


class WebhookConfigError(RuntimeError):
    """Raised when webhook receiver configuration is invalid."""

    @classmethod
    def missing_secret(cls) -> WebhookConfigError:
        """Return an error when no shared secret is configured."""
        return cls("GITEAHOOK_WEBHOOK_SECRET is required to verify deliveries")

    @classmethod
    def invalid_path(cls, path: str) -> WebhookConfigError:
        """Return an error for a route path that is not absolute."""
        return cls(f"GITEAHOOK_WEBHOOK_PATH must start with '/', got: {path!r}")

    @classmethod
    def invalid_dispatcher(cls, reference: str) -> WebhookConfigError:
        """Return an error for a malformed ``module:callable`` reference."""
        return cls(
            f"GITEAHOOK_DISPATCHER must look like 'package.module:callable', "
            f"got: {reference!r}"
        )


@dc.dataclass(frozen=True, slots=True)
class WebhookConfig:
    """Settings read once at startup and never mutated.

    Attributes
    ----------
    secret
        Shared secret used to verify ``X-Gitea-Signature``.
    path
        Route the webhook resource is mounted on.
    dispatcher
        Optional ``module:callable`` reference to the dispatch callback.
        When ``None`` accepted events are only logged.

    """

    secret: str
    path: str = _DEFAULT_PATH
    dispatcher: str | None = None

    def __post_init__(self) -> None:
        """Validate field values."""
        if not self.secret:
            raise WebhookConfigError.missing_secret()
        if not self.path.startswith("/"):
            raise WebhookConfigError.invalid_path(self.path)
        if self.dispatcher is not None:
            module, sep, attr = self.dispatcher.partition(":")
            if not (module and sep and attr):
                raise WebhookConfigError.invalid_dispatcher(self.dispatcher)

    @classmethod
    def from_env(cls) -> WebhookConfig:
        """Build configuration from environment variables.

        Reads the following environment variables:

        - ``GITEAHOOK_WEBHOOK_SECRET``: Required shared secret. Surrounding
          whitespace is significant and preserved.
        - ``GITEAHOOK_WEBHOOK_PATH``: Optional route, default ``/webhook``.
        - ``GITEAHOOK_DISPATCHER``: Optional ``module:callable`` reference.

        Raises
        ------
        WebhookConfigError
            If the secret is missing or another value is malformed.

        """
        secret = os.environ.get("GITEAHOOK_WEBHOOK_SECRET", "")
        if not secret:
            raise WebhookConfigError.missing_secret()

        path = os.environ.get("GITEAHOOK_WEBHOOK_PATH", "").strip() or _DEFAULT_PATH
        dispatcher = os.environ.get("GITEAHOOK_DISPATCHER", "").strip() or None
        return cls(secret=secret, path=path, dispatcher=dispatcher)


__all__ = ["WebhookConfig", "WebhookConfigError"]
