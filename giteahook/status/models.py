"""Commit status records exchanged with the server's REST API."""

from __future__ import annotations

import enum

import msgspec

from giteahook.events.models import Repository, User


class CommitStatusState(enum.StrEnum):
    """Outcome a commit status reports."""

    PENDING = "pending"
    SUCCESS = "success"
    ERROR = "error"
    FAILURE = "failure"
    WARNING = "warning"


class CreateStatusOption(msgspec.Struct, kw_only=True, frozen=True):
    """Request body for creating a commit status.

    Attributes
    ----------
    state
        Outcome to attach to the commit.
    context
        Label distinguishing this check from others on the same commit,
        e.g. ``ci/build``.
    description
        Short human-readable summary shown next to the status.
    target_url
        Link from the server's UI to the system that produced the status.

    """

    state: CommitStatusState
    context: str = ""
    description: str = ""
    target_url: str = ""


class CommitStatus(msgspec.Struct, kw_only=True, frozen=True):
    """A commit status as stored by the server."""

    id: int = 0
    index: int = 0
    repo_id: int = 0
    repo: Repository | None = None
    state: CommitStatusState = CommitStatusState.PENDING
    sha: str = ""
    target_url: str = ""
    description: str = ""
    context_hash: str = ""
    context: str = ""
    creator: User = msgspec.field(default_factory=User)
    creator_id: int = 0


__all__ = ["CommitStatus", "CommitStatusState", "CreateStatusOption"]
