"""High-level client facades."""

from .dialogs_client import DialogsClient

__all__ = ["DialogsClient"]
