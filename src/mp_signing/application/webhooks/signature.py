"""Application webhooks – RSA request signing and verification.

The sender signs ``METHOD:path:sha256(body):timestamp`` and ships the result in
the signature header next to the timestamp header; the receiver rebuilds the
same canonical string from what it received and checks it against the
sender's public key.
"""
from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime

from mp_signing.config import SigningSettings
from mp_signing.kernel.errors import SignatureDecodeError, SignatureError
from mp_signing.observability.logging import get_logger
from mp_signing.signing import RsaSigner, RsaVerifier, SignaturePayload, format_timestamp
from mp_signing.signing.keys import PrivateKeyInput, PublicKeyInput

__all__ = ["WebhookRequestSigner", "WebhookRequestVerifier"]

_log = get_logger(__name__)


def _timestamp_text(timestamp: str | datetime) -> str:
    return format_timestamp(timestamp) if isinstance(timestamp, datetime) else timestamp


class WebhookRequestSigner:
    """Sender side: signs outgoing requests with a private key."""

    def __init__(self, private_key: PrivateKeyInput, settings: SigningSettings | None = None) -> None:
        self._settings = settings or SigningSettings()
        self._signer = RsaSigner(private_key, min_key_bits=self._settings.min_key_bits)

    def sign(self, method: str, path: str, body: bytes, timestamp: str | datetime) -> str:
        payload = SignaturePayload.for_request(method, path, body, timestamp)
        return self._signer.sign_payload(payload)

    def signature_headers(
        self,
        method: str,
        path: str,
        body: bytes,
        timestamp: str | datetime,
    ) -> dict[str, str]:
        """Return the timestamp and signature headers for an outgoing request."""
        ts = _timestamp_text(timestamp)
        return {
            self._settings.timestamp_header: ts,
            self._settings.signature_header: self.sign(method, path, body, ts),
        }


class WebhookRequestVerifier:
    """Receiver side: checks incoming requests against the sender's public key."""

    def __init__(self, public_key: PublicKeyInput, settings: SigningSettings | None = None) -> None:
        self._settings = settings or SigningSettings()
        self._verifier = RsaVerifier(public_key, min_key_bits=self._settings.min_key_bits)

    def verify(
        self,
        method: str,
        path: str,
        body: bytes,
        timestamp: str | datetime,
        signature: str,
    ) -> None:
        """Raise a :class:`SignatureError` subclass unless the request is authentic."""
        payload = SignaturePayload.for_request(method, path, body, timestamp)
        try:
            self._verifier.verify_payload(payload, signature)
        except SignatureError as exc:
            _log.warning(
                "webhook.signature_rejected",
                code=exc.code,
                category=exc.category.value,
                method=method,
                path=path,
                timestamp=payload.timestamp,
            )
            raise

    def verify_headers(
        self,
        method: str,
        path: str,
        body: bytes,
        headers: Mapping[str, str],
    ) -> None:
        """Verify using the timestamp and signature found in *headers*."""
        lowered = {k.lower(): v for k, v in headers.items()}
        timestamp = lowered.get(self._settings.timestamp_header.lower())
        signature = lowered.get(self._settings.signature_header.lower())
        if timestamp is None or signature is None:
            missing = self._settings.timestamp_header if timestamp is None else self._settings.signature_header
            _log.warning("webhook.signature_header_missing", header=missing, method=method, path=path)
            raise SignatureDecodeError(
                f"Missing header {missing!r}",
                detail={"header": missing},
            )
        self.verify(method, path, body, timestamp, signature)

    def is_valid(
        self,
        method: str,
        path: str,
        body: bytes,
        timestamp: str | datetime,
        signature: str,
    ) -> bool:
        try:
            self.verify(method, path, body, timestamp, signature)
        except SignatureError:
            return False
        return True
