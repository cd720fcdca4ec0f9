"""Application – request-level signing for webhook senders and receivers."""
