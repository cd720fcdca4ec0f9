"""Application webhooks – signed request delivery and receipt."""
from mp_signing.application.webhooks.signature import WebhookRequestSigner, WebhookRequestVerifier

__all__ = ["WebhookRequestSigner", "WebhookRequestVerifier"]
