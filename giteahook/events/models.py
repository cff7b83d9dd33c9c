"""Typed records for webhook payloads.

``Event`` mirrors the server's webhook JSON as a single flat record. The
record is not discriminated by event kind: push deliveries populate the ref
and commit fields, pull-request deliveries populate ``number``, ``action``
and ``pull_request``. :attr:`giteahook.events.kinds.EventType.relevant_fields`
lists the fields that carry meaning for each kind.

All records are frozen ``msgspec.Struct`` types. Missing keys decode to the
zero value of the field type, unknown keys are ignored, and arrays decode as
tuples so that a decoded event cannot be mutated.
"""

from __future__ import annotations

import datetime as dt  # noqa: TC003 - msgspec resolves annotations at runtime

import msgspec


class GitUser(msgspec.Struct, kw_only=True, frozen=True):
    """Author or committer identity recorded in a git commit."""

    name: str = ""
    email: str = ""
    username: str = ""


class User(msgspec.Struct, kw_only=True, frozen=True):
    """Server account attached to a repository, pusher or pull request."""

    id: int = 0
    login: str = ""
    full_name: str = ""
    email: str = ""
    avatar_url: str = ""
    language: str = ""
    is_admin: bool = False
    last_login: dt.datetime | None = None
    created: dt.datetime | None = None
    username: str = ""


class RepositoryPermissions(msgspec.Struct, kw_only=True, frozen=True):
    """Permissions the webhook's owner holds on the repository."""

    admin: bool = False
    push: bool = False
    pull: bool = False


class RepositoryInternalTracker(msgspec.Struct, kw_only=True, frozen=True):
    """Settings of the built-in issue tracker."""

    enable_time_tracker: bool = False
    allow_only_contributors_to_track_time: bool = False
    enable_issue_dependencies: bool = False


class Repository(msgspec.Struct, kw_only=True, frozen=True):
    """Repository metadata included with every delivery.

    ``parent`` is only set for forks and holds the upstream repository.
    """

    id: int = 0
    owner: User = msgspec.field(default_factory=User)
    name: str = ""
    full_name: str = ""
    description: str = ""
    empty: bool = False
    private: bool = False
    fork: bool = False
    parent: Repository | None = None
    mirror: bool = False
    size: int = 0
    html_url: str = ""
    ssh_url: str = ""
    clone_url: str = ""
    original_url: str = ""
    website: str = ""
    stars_count: int = 0
    forks_count: int = 0
    watchers_count: int = 0
    open_issues_count: int = 0
    default_branch: str = ""
    archived: bool = False
    created_at: dt.datetime | None = None
    updated_at: dt.datetime | None = None
    permissions: RepositoryPermissions = msgspec.field(
        default_factory=RepositoryPermissions
    )
    has_issues: bool = False
    internal_tracker: RepositoryInternalTracker = msgspec.field(
        default_factory=RepositoryInternalTracker
    )
    has_wiki: bool = False
    has_pull_requests: bool = False
    ignore_whitespace_conflicts: bool = False
    allow_merge_commits: bool = False
    allow_rebase: bool = False
    allow_rebase_explicit: bool = False
    allow_squash_merge: bool = False
    avatar_url: str = ""


class Commit(msgspec.Struct, kw_only=True, frozen=True):
    """A single commit listed in a push delivery."""

    id: str = ""
    message: str = ""
    url: str = ""
    author: GitUser = msgspec.field(default_factory=GitUser)
    committer: GitUser = msgspec.field(default_factory=GitUser)
    timestamp: dt.datetime | None = None


class Label(msgspec.Struct, kw_only=True, frozen=True):
    """Issue label applied to a pull request."""

    id: int = 0
    name: str = ""
    color: str = ""
    description: str = ""
    url: str = ""


class Ref(msgspec.Struct, kw_only=True, frozen=True):
    """Branch tip referenced as the head or base of a pull request."""

    label: str = ""
    ref: str = ""
    sha: str = ""
    repo_id: int = 0
    repo: Repository = msgspec.field(default_factory=Repository)


class PullRequest(msgspec.Struct, kw_only=True, frozen=True):
    """Pull request state carried by ``pull_request`` deliveries.

    ``mergeable`` reports whether the server could merge the branch cleanly;
    ``merged`` reports whether it has been merged. They come from separate
    JSON keys. ``assignee`` and ``assignees`` are ``None`` when the server
    sends ``null`` for an unassigned pull request.
    """

    id: int = 0
    url: str = ""
    number: int = 0
    user: User = msgspec.field(default_factory=User)
    title: str = ""
    body: str = ""
    labels: tuple[Label, ...] = ()
    assignee: User | None = None
    assignees: tuple[User, ...] | None = None
    state: str = ""
    comments: int = 0
    html_url: str = ""
    diff_url: str = ""
    patch_url: str = ""
    mergeable: bool = False
    merged: bool = False
    merged_at: dt.datetime | None = None
    merge_commit_sha: str | None = None
    merged_by: User | None = None
    base: Ref = msgspec.field(default_factory=Ref)
    head: Ref = msgspec.field(default_factory=Ref)
    merge_base: str = ""
    due_date: dt.datetime | None = None
    created_at: dt.datetime | None = None
    updated_at: dt.datetime | None = None
    closed_at: dt.datetime | None = None


class Event(msgspec.Struct, kw_only=True, frozen=True):
    """Decoded webhook payload shared by every supported event kind.

    Attributes
    ----------
    secret
        Secret echoed by older servers in the body. Never used for
        authentication; the signature header is authoritative.
    action
        Pull-request action, e.g. ``opened`` or ``synchronized``.
    number
        Pull-request number.
    ref, before, after, compare_url, commits
        Push metadata: the updated ref, the old and new tip SHAs, the compare
        link and the pushed commits.
    pull_request
        Pull-request state for ``pull_request`` deliveries.
    repository
        The repository the delivery concerns.
    pusher, sender
        The account that pushed and the account that triggered the delivery.

    """

    secret: str = ""
    action: str = ""
    number: int = 0
    ref: str = ""
    before: str = ""
    after: str = ""
    compare_url: str = ""
    commits: tuple[Commit, ...] = ()
    pull_request: PullRequest = msgspec.field(default_factory=PullRequest)
    repository: Repository = msgspec.field(default_factory=Repository)
    pusher: User = msgspec.field(default_factory=User)
    sender: User = msgspec.field(default_factory=User)


__all__ = [
    "Commit",
    "Event",
    "GitUser",
    "Label",
    "PullRequest",
    "Ref",
    "Repository",
    "RepositoryInternalTracker",
    "RepositoryPermissions",
    "User",
]
