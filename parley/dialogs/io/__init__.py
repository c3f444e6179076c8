"""I/O layer: the transport protocol and the bundled HTTP gateway transport."""

from .http import HTTPTransport
from .transport import Transport

__all__ = ["HTTPTransport", "Transport"]
