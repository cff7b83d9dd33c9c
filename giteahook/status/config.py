"""Configuration for the commit status client."""

from __future__ import annotations

import dataclasses
import os

import httpx

from giteahook.status.errors import GiteaConfigError

_HTTP_SCHEMES = frozenset({"http", "https"})


@dataclasses.dataclass(frozen=True, slots=True)
class GiteaAPIConfig:
    """Connection settings for the server's REST API.

    A token takes precedence over basic-auth credentials when both are set.

    Attributes
    ----------
    base_url
        Root URL of the server, e.g. ``https://git.example.com`` or
        ``https://example.com/gitea`` for a sub-path install.
    token
        Access token sent as ``Authorization: token <token>``.
    username, password
        Basic-auth credentials used when no token is configured.

    """

    base_url: str
    token: str = ""
    username: str = ""
    password: str = dataclasses.field(default="", repr=False)

    def __post_init__(self) -> None:
        """Validate the base URL."""
        try:
            url = httpx.URL(self.base_url)
        except httpx.InvalidURL as exc:
            raise GiteaConfigError.invalid_url(self.base_url) from exc
        if url.scheme not in _HTTP_SCHEMES or not url.host:
            raise GiteaConfigError.invalid_url(self.base_url)

    @classmethod
    def from_env(cls) -> GiteaAPIConfig:
        """Build configuration from environment variables.

        Reads the following environment variables:

        - ``GITEAHOOK_GITEA_URL``: Required server root URL
        - ``GITEAHOOK_GITEA_TOKEN``: Optional access token
        - ``GITEAHOOK_GITEA_USERNAME``: Optional basic-auth username
        - ``GITEAHOOK_GITEA_PASSWORD``: Optional basic-auth password

        Raises
        ------
        GiteaConfigError
            If the URL is missing or malformed.

        """
        base_url = os.environ.get("GITEAHOOK_GITEA_URL", "").strip()
        if not base_url:
            raise GiteaConfigError.missing_url()

        return cls(
            base_url=base_url,
            token=os.environ.get("GITEAHOOK_GITEA_TOKEN", "").strip(),
            username=os.environ.get("GITEAHOOK_GITEA_USERNAME", "").strip(),
            password=os.environ.get("GITEAHOOK_GITEA_PASSWORD", ""),
        )


__all__ = ["GiteaAPIConfig"]
