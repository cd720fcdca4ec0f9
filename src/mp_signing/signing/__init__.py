"""Signing – body digest, canonical string, RSA sign and verify."""
from mp_signing.signing.canonical import (
    SEPARATOR,
    SignaturePayload,
    canonicalize,
    format_timestamp,
)
from mp_signing.signing.digest import EMPTY_BODY_DIGEST, body_digest, message_digest
from mp_signing.signing.keys import (
    DEFAULT_MIN_KEY_BITS,
    PrivateSigningKey,
    PublicVerificationKey,
    parse_private_key,
    parse_public_key,
)
from mp_signing.signing.signer import RsaSigner, sign
from mp_signing.signing.verifier import RsaVerifier, check, decode_signature, verify

__all__ = [
    "DEFAULT_MIN_KEY_BITS",
    "EMPTY_BODY_DIGEST",
    "PrivateSigningKey",
    "PublicVerificationKey",
    "RsaSigner",
    "RsaVerifier",
    "SEPARATOR",
    "SignaturePayload",
    "body_digest",
    "canonicalize",
    "check",
    "decode_signature",
    "format_timestamp",
    "message_digest",
    "parse_private_key",
    "parse_public_key",
    "sign",
    "verify",
]
