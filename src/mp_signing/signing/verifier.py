"""Signing – RSA PKCS#1 v1.5 / SHA-256 verifier.

Verification recomputes the SHA-256 of the canonical string independently of
the signer and is fully deterministic: same inputs, same verdict.
"""
from __future__ import annotations

import base64
import binascii

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import padding, utils

from mp_signing.kernel.errors import (
    SignatureDecodeError,
    SignatureError,
    SignatureMismatchError,
)
from mp_signing.kernel.types import Err, Ok, Result
from mp_signing.signing.canonical import SignaturePayload
from mp_signing.signing.digest import message_digest
from mp_signing.signing.keys import (
    DEFAULT_MIN_KEY_BITS,
    PublicKeyInput,
    PublicVerificationKey,
    as_public_key,
)

__all__ = ["RsaVerifier", "check", "decode_signature", "verify"]


def decode_signature(signature: str) -> bytes:
    """Strict standard-alphabet base64 decode of a transported signature."""
    if not isinstance(signature, (str, bytes)):
        raise SignatureDecodeError("Signature is missing")
    try:
        return base64.b64decode(signature, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise SignatureDecodeError("Signature is not valid base64", cause=exc) from exc


def _verify_with(public_key: PublicVerificationKey, canonical: str, raw: bytes) -> None:
    try:
        digest = message_digest(canonical)
    except UnicodeEncodeError as exc:
        raise SignatureMismatchError(cause=exc) from exc
    try:
        public_key.rsa_key.verify(
            raw,
            digest,
            padding.PKCS1v15(),
            utils.Prehashed(hashes.SHA256()),
        )
    except InvalidSignature as exc:
        raise SignatureMismatchError(cause=exc) from exc


def verify(
    canonical: str,
    signature: str,
    key: PublicKeyInput,
    *,
    min_key_bits: int = DEFAULT_MIN_KEY_BITS,
) -> None:
    """Return ``None`` iff *signature* is valid for *canonical* under *key*.

    Raises:
        SignatureDecodeError: *signature* is not valid base64.
        KeyParseError: the public key is absent, malformed, not RSA or too small.
        SignatureMismatchError: the signature does not validate.
    """
    raw = decode_signature(signature)
    public_key = as_public_key(key, min_key_bits=min_key_bits)
    _verify_with(public_key, canonical, raw)


def check(
    canonical: str,
    signature: str,
    key: PublicKeyInput,
    *,
    min_key_bits: int = DEFAULT_MIN_KEY_BITS,
) -> Result[None, SignatureError]:
    """Like :func:`verify` but returns the verdict as ``Ok(None)`` / ``Err(error)``."""
    try:
        verify(canonical, signature, key, min_key_bits=min_key_bits)
    except SignatureError as exc:
        return Err(exc)
    return Ok(None)


class RsaVerifier:
    """Verifies signatures against one public key parsed up front."""

    def __init__(
        self,
        key: PublicKeyInput,
        *,
        min_key_bits: int = DEFAULT_MIN_KEY_BITS,
    ) -> None:
        self._key = as_public_key(key, min_key_bits=min_key_bits)

    @property
    def key(self) -> PublicVerificationKey:
        return self._key

    def verify(self, canonical: str, signature: str) -> None:
        _verify_with(self._key, canonical, decode_signature(signature))

    def verify_payload(self, payload: SignaturePayload, signature: str) -> None:
        self.verify(payload.canonical(), signature)

    def check(self, canonical: str, signature: str) -> Result[None, SignatureError]:
        try:
            self.verify(canonical, signature)
        except SignatureError as exc:
            return Err(exc)
        return Ok(None)
