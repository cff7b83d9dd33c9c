"""Errors raised by the commit status client."""

from __future__ import annotations


class GiteaStatusError(Exception):
    """Base exception for commit status client failures."""


class GiteaAPIError(GiteaStatusError):
    """Raised when a status update does not succeed.

    Attributes
    ----------
    status_code
        HTTP status returned by the server, or ``None`` when the request
        never produced a response.

    """

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        """Initialise with a message and optional HTTP status code."""
        self.status_code = status_code
        super().__init__(message)

    @classmethod
    def http_error(cls, status_code: int) -> GiteaAPIError:
        """Return an error for a status other than 200 or 201."""
        return cls(
            f"invalid status code returned: {status_code}", status_code=status_code
        )

    @classmethod
    def network_error(cls, detail: str) -> GiteaAPIError:
        """Return an error for transport failures (DNS, connection, TLS)."""
        return cls(f"status update request failed: {detail}")

    @classmethod
    def encode_error(cls, detail: str) -> GiteaAPIError:
        """Return an error when the status option cannot be serialised."""
        return cls(f"could not encode status option: {detail}")


class GiteaConfigError(GiteaStatusError):
    """Raised when status client configuration is invalid."""

    @classmethod
    def missing_url(cls) -> GiteaConfigError:
        """Return an error when no server URL is configured."""
        return cls("GITEAHOOK_GITEA_URL is required for the status client")

    @classmethod
    def invalid_url(cls, url: str) -> GiteaConfigError:
        """Return an error for a URL without an http(s) scheme and host."""
        return cls(f"Server URL must be an absolute http(s) URL, got: {url!r}")


__all__ = ["GiteaAPIError", "GiteaConfigError", "GiteaStatusError"]
