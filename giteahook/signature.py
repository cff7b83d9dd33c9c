"""HMAC-SHA256 signatures over raw webhook bodies.

The server signs the body bytes it sends with the shared webhook secret and
puts the lowercase hex digest in the ``X-Gitea-Signature`` header. The digest
must be computed over the bytes as received: re-encoding a parsed body can
reorder keys or change whitespace and would no longer match.
"""

from __future__ import annotations

import hashlib
import hmac

SIGNATURE_HEADER = "X-Gitea-Signature"


def _secret_bytes(secret: str | bytes) -> bytes:
    return secret.encode("utf-8") if isinstance(secret, str) else secret


def compute_signature(secret: str | bytes, body: bytes) -> str:
    """Return the lowercase hex HMAC-SHA256 of ``body`` keyed by ``secret``."""
    return hmac.new(_secret_bytes(secret), body, hashlib.sha256).hexdigest()


def verify_signature(secret: str | bytes, body: bytes, asserted: str) -> bool:
    """Check ``asserted`` against the signature of ``body``.

    The comparison runs in constant time with respect to the expected
    digest. Both sides are compared as bytes so that header values containing
    non-ASCII characters fail verification instead of raising.

    Parameters
    ----------
    secret
        Shared webhook secret.
    body
        Raw request body bytes.
    asserted
        Signature claimed by the sender, as lowercase hex.

    Returns
    -------
    bool
        ``True`` only when ``asserted`` equals the computed digest.

    """
    expected = compute_signature(secret, body).encode("ascii")
    return hmac.compare_digest(expected, asserted.encode("utf-8"))


__all__ = ["SIGNATURE_HEADER", "compute_signature", "verify_signature"]
