"""
mp_signing – RSA request signing for gateway/merchant webhooks.

Import path convention::

    from mp_signing.signing import body_digest, canonicalize, sign, verify
    from mp_signing.signing import parse_private_key, parse_public_key
    from mp_signing.kernel.errors import SignatureError, SignatureMismatchError
    from mp_signing.application.webhooks import WebhookRequestVerifier
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
