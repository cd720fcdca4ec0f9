"""Signing – body digest."""
from __future__ import annotations

import hashlib

__all__ = ["EMPTY_BODY_DIGEST", "body_digest", "message_digest"]


def body_digest(body: bytes) -> str:
    """Return the lowercase hex SHA-256 of *body* exactly as transmitted.

    No re-encoding or whitespace normalisation happens here: the bytes that
    went over the wire are the bytes that get hashed.
    """
    if isinstance(body, str):
        raise TypeError("body must be bytes as transmitted, not str")
    return hashlib.sha256(body).hexdigest()


EMPTY_BODY_DIGEST = body_digest(b"")


def message_digest(canonical: str) -> bytes:
    """Raw SHA-256 over the UTF-8 bytes of a canonical string."""
    return hashlib.sha256(canonical.encode("utf-8")).digest()
