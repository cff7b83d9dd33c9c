"""Commit status reporting against the server's REST API."""

from __future__ import annotations

from .client import GiteaStatusClient
from .config import GiteaAPIConfig
from .errors import GiteaAPIError, GiteaConfigError, GiteaStatusError
from .models import CommitStatus, CommitStatusState, CreateStatusOption

__all__ = [
    "CommitStatus",
    "CommitStatusState",
    "CreateStatusOption",
    "GiteaAPIConfig",
    "GiteaAPIError",
    "GiteaConfigError",
    "GiteaStatusClient",
    "GiteaStatusError",
]
