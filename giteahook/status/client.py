"""Client for pushing commit statuses to the server's REST API.

One call issues exactly one POST. There is no retry, backoff or custom
timeout; wrap :class:`GiteaStatusClient` if a deployment needs them.
"""

from __future__ import annotations

import typing as typ
from http import HTTPStatus

import httpx
import msgspec

from giteahook.logging import get_logger, log_error, log_info
from giteahook.status.errors import GiteaAPIError

if typ.TYPE_CHECKING:
    import types

    from giteahook.status.config import GiteaAPIConfig
    from giteahook.status.models import CreateStatusOption

logger = get_logger(__name__)

_SUCCESS_STATUSES = frozenset({HTTPStatus.OK, HTTPStatus.CREATED})
_STATUS_PATH = "api/v1/repos/{repository}/statuses/{commit_id}"


class GiteaStatusClient:
    """Report build and check outcomes against commits.

    Parameters
    ----------
    config
        Server URL and credentials.
    http_client
        Optional ``httpx.AsyncClient``, mainly for tests. When omitted the
        instance creates and owns its own client.

    Examples
    --------
    >>> import asyncio
    >>> from giteahook.status import (
    ...     CommitStatusState, CreateStatusOption, GiteaAPIConfig, GiteaStatusClient,
    ... )
    >>> async def report() -> None:
    ...     config = GiteaAPIConfig(base_url="https://git.example.com", token="t")
    ...     async with GiteaStatusClient(config) as client:
    ...         await client.update_commit_state(
    ...             "octo/reef",
    ...             "9d1c3f0",
    ...             CreateStatusOption(state=CommitStatusState.SUCCESS, context="ci"),
    ...         )

    """

    def __init__(
        self,
        config: GiteaAPIConfig,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialise the client with configuration."""
        self._config = config
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient()

    @property
    def config(self) -> GiteaAPIConfig:
        """Read-only access to the client configuration."""
        return self._config

    async def aclose(self) -> None:
        """Close any owned HTTP resources."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> GiteaStatusClient:
        """Return ``self`` for use as an async context manager."""
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: types.TracebackType | None,
    ) -> None:
        """Close owned resources on exit."""
        await self.aclose()

    def status_url(self, repository: str, commit_id: str) -> str:
        """Return the statuses endpoint for ``commit_id`` in ``repository``.

        Parameters
        ----------
        repository
            Repository in ``owner/name`` form.
        commit_id
            Full or abbreviated commit SHA.

        """
        base = self._config.base_url.rstrip("/")
        path = _STATUS_PATH.format(
            repository=repository.strip("/"),
            commit_id=commit_id.strip("/"),
        )
        return f"{base}/{path}"

    async def update_commit_state(
        self,
        repository: str,
        commit_id: str,
        option: CreateStatusOption,
    ) -> None:
        """Create a commit status.

        Parameters
        ----------
        repository
            Repository in ``owner/name`` form.
        commit_id
            Commit SHA the status is attached to.
        option
            Status to create.

        Raises
        ------
        GiteaAPIError
            If the body cannot be encoded, the request fails in transport, or
            the server answers with anything other than 200 or 201.

        """
        try:
            body = msgspec.json.encode(option)
        except msgspec.EncodeError as exc:
            raise GiteaAPIError.encode_error(str(exc)) from exc

        url = self.status_url(repository, commit_id)
        headers = {"Content-Type": "application/json"}
        auth: httpx.Auth | None = None
        if self._config.token:
            headers["Authorization"] = f"token {self._config.token}"
        elif self._config.username:
            auth = httpx.BasicAuth(self._config.username, self._config.password)

        try:
            response = await self._client.post(
                url, content=body, headers=headers, auth=auth
            )
        except httpx.RequestError as exc:
            log_error(
                logger,
                "Status update for %s@%s failed: %s",
                repository,
                commit_id,
                exc,
            )
            raise GiteaAPIError.network_error(str(exc)) from exc

        if response.status_code not in _SUCCESS_STATUSES:
            log_error(
                logger,
                "Status update for %s@%s returned HTTP %d",
                repository,
                commit_id,
                response.status_code,
            )
            raise GiteaAPIError.http_error(response.status_code)

        log_info(
            logger,
            "Set %s status %r on %s@%s",
            option.state,
            option.context,
            repository,
            commit_id,
        )


__all__ = ["GiteaStatusClient"]
