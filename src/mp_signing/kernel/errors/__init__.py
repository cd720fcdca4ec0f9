"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError                    (base.py)
    └── SignatureError           (signing.py)
        ├── KeyParseError          configuration
        ├── SigningError           configuration
        ├── SignatureDecodeError   tampering
        └── SignatureMismatchError tampering
"""

from mp_signing.kernel.errors.base import BaseError
from mp_signing.kernel.errors.signing import (
    FailureCategory,
    KeyParseError,
    SignatureDecodeError,
    SignatureError,
    SignatureErrorKind,
    SignatureMismatchError,
    SigningError,
)

__all__ = [
    "BaseError",
    "FailureCategory",
    "KeyParseError",
    "SignatureDecodeError",
    "SignatureError",
    "SignatureErrorKind",
    "SignatureMismatchError",
    "SigningError",
]
