"""Kernel – framework-agnostic building blocks."""

from mp_signing.kernel.errors import (
    BaseError,
    FailureCategory,
    KeyParseError,
    SignatureDecodeError,
    SignatureError,
    SignatureErrorKind,
    SignatureMismatchError,
    SigningError,
)
from mp_signing.kernel.types import Err, Ok, Result

__all__ = [
    "BaseError",
    "Err",
    "FailureCategory",
    "KeyParseError",
    "Ok",
    "Result",
    "SignatureDecodeError",
    "SignatureError",
    "SignatureErrorKind",
    "SignatureMismatchError",
    "SigningError",
]
