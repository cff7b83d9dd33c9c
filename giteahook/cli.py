"""Compute the ``X-Gitea-Signature`` value for a webhook payload.

Useful for replaying a captured delivery against a receiver by hand::

    giteahook-sign payload.json --secret s3cret
    curl -H "X-Gitea-Signature: $(giteahook-sign payload.json)" ...

"""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from .signature import compute_signature


def main(argv: list[str] | None = None) -> int:
    """Print the signature of a payload's raw bytes.

    Parameters
    ----------
    argv : list[str] | None, optional
        Command-line arguments. ``None`` defaults to ``sys.argv``.

    Returns
    -------
    int
        Exit code: 0 on success, 1 when no secret is available.

    """
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument(
        "path",
        type=Path,
        nargs="?",
        default=None,
        help="Payload file to sign (defaults to stdin)",
    )
    parser.add_argument(
        "--secret",
        default=None,
        help="Shared secret (defaults to GITEAHOOK_WEBHOOK_SECRET)",
    )
    args = parser.parse_args(argv)

    secret = args.secret or os.environ.get("GITEAHOOK_WEBHOOK_SECRET", "")
    if not secret:
        print(
            "No secret given and GITEAHOOK_WEBHOOK_SECRET is not set",
            file=sys.stderr,
        )
        return 1

    body = sys.stdin.buffer.read() if args.path is None else args.path.read_bytes()
    print(compute_signature(secret, body))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
