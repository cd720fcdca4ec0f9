"""Signing – RSA PKCS#1 v1.5 / SHA-256 signer."""
from __future__ import annotations

import base64

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import padding, utils

from mp_signing.kernel.errors import SigningError
from mp_signing.signing.canonical import SignaturePayload
from mp_signing.signing.digest import message_digest
from mp_signing.signing.keys import (
    DEFAULT_MIN_KEY_BITS,
    PrivateKeyInput,
    PrivateSigningKey,
    as_private_key,
)

__all__ = ["RsaSigner", "sign"]


def _sign_with(private_key: PrivateSigningKey, canonical: str) -> str:
    try:
        digest = message_digest(canonical)
        raw = private_key.rsa_key.sign(
            digest,
            padding.PKCS1v15(),
            utils.Prehashed(hashes.SHA256()),
        )
    except (ValueError, TypeError) as exc:
        raise SigningError("RSA signing failed", cause=exc) from exc
    return base64.b64encode(raw).decode("ascii")


def sign(
    canonical: str,
    key: PrivateKeyInput,
    *,
    min_key_bits: int = DEFAULT_MIN_KEY_BITS,
) -> str:
    """Sign *canonical* and return the base64 signature.

    *key* is either a parsed :class:`PrivateSigningKey` or PKCS#8 PEM text,
    which is parsed on every call.

    Raises:
        KeyParseError: the PEM cannot be decoded, is not RSA, or is too small.
        SigningError: the RSA operation failed.
    """
    return _sign_with(as_private_key(key, min_key_bits=min_key_bits), canonical)


class RsaSigner:
    """Signs canonical strings with one private key parsed up front."""

    def __init__(
        self,
        key: PrivateKeyInput,
        *,
        min_key_bits: int = DEFAULT_MIN_KEY_BITS,
    ) -> None:
        self._key = as_private_key(key, min_key_bits=min_key_bits)

    @property
    def key(self) -> PrivateSigningKey:
        return self._key

    def sign(self, canonical: str) -> str:
        return _sign_with(self._key, canonical)

    def sign_payload(self, payload: SignaturePayload) -> str:
        return _sign_with(self._key, payload.canonical())
