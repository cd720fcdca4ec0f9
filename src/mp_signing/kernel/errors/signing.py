"""Signing errors — the four failure kinds of sign/verify.

Every error carries a :class:`SignatureErrorKind` and a
:class:`FailureCategory` so callers can tell a broken configuration from a
tampered request without parsing messages.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, ClassVar

from mp_signing.kernel.errors.base import BaseError


class FailureCategory(str, Enum):
    """Who has to act on a failure."""

    CONFIGURATION = "configuration"
    TAMPERING = "tampering"


class SignatureErrorKind(str, Enum):
    KEY_PARSE = "key_parse"
    SIGNATURE_DECODE = "signature_decode"
    SIGNATURE_MISMATCH = "signature_mismatch"
    SIGNING = "signing"


class SignatureError(BaseError):
    """Base class for every sign/verify failure."""

    default_code = "signature_error"
    kind: ClassVar[SignatureErrorKind]
    category: ClassVar[FailureCategory]

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        kind = getattr(self, "kind", None)
        if kind is not None:
            base["kind"] = kind.value
            base["category"] = self.category.value
        return base

    @property
    def is_configuration_error(self) -> bool:
        return self.category is FailureCategory.CONFIGURATION

    @property
    def is_tampering(self) -> bool:
        return self.category is FailureCategory.TAMPERING


class KeyParseError(SignatureError):
    """Key material is malformed, of the wrong type, or too small."""

    default_code = "key_parse_error"
    kind = SignatureErrorKind.KEY_PARSE
    category = FailureCategory.CONFIGURATION


class SigningError(SignatureError):
    """The RSA signing operation itself failed."""

    default_code = "signing_error"
    kind = SignatureErrorKind.SIGNING
    category = FailureCategory.CONFIGURATION


class SignatureDecodeError(SignatureError):
    """The transported signature is not valid base64."""

    default_code = "signature_decode_error"
    kind = SignatureErrorKind.SIGNATURE_DECODE
    category = FailureCategory.TAMPERING


class SignatureMismatchError(SignatureError):
    """A well-formed signature does not validate for the payload and key."""

    default_code = "signature_mismatch"
    kind = SignatureErrorKind.SIGNATURE_MISMATCH
    category = FailureCategory.TAMPERING

    def __init__(self, message: str = "Signature mismatch", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


__all__ = [
    "FailureCategory",
    "KeyParseError",
    "SignatureDecodeError",
    "SignatureError",
    "SignatureErrorKind",
    "SignatureMismatchError",
    "SigningError",
]
