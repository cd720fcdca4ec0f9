"""Signing – canonical string-to-sign.

The canonical form is::

    METHOD:path:body_digest_hex:timestamp

Both parties must build it bit-for-bit identically. Nothing is escaped or
normalised, so a differing case, trailing slash or digest case on either side
only ever surfaces as a signature mismatch.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from mp_signing.signing.digest import body_digest

__all__ = ["SEPARATOR", "SignaturePayload", "canonicalize", "format_timestamp"]

SEPARATOR = ":"


def canonicalize(method: str, path: str, body_digest_hex: str, timestamp: str) -> str:
    return SEPARATOR.join((method, path, body_digest_hex, timestamp))


def format_timestamp(moment: datetime) -> str:
    """Render *moment* as ISO-8601 with seconds and a numeric offset.

    ``2024-04-22T09:55:40+07:00``. UTC renders as ``+00:00``, never ``Z``.
    """
    if moment.tzinfo is None or moment.utcoffset() is None:
        raise ValueError("timestamp must be timezone-aware")
    return moment.isoformat(timespec="seconds")


@dataclass(frozen=True)
class SignaturePayload:
    """The four signed fields of a request."""

    method: str
    path: str
    body_digest_hex: str
    timestamp: str

    @classmethod
    def for_request(
        cls,
        method: str,
        path: str,
        body: bytes,
        timestamp: str | datetime,
    ) -> SignaturePayload:
        if isinstance(timestamp, datetime):
            timestamp = format_timestamp(timestamp)
        return cls(
            method=method,
            path=path,
            body_digest_hex=body_digest(body),
            timestamp=timestamp,
        )

    def canonical(self) -> str:
        return canonicalize(self.method, self.path, self.body_digest_hex, self.timestamp)
