"""Core components."""

from .enums import PeerKind, ResponseShape
from .exceptions import DialogsError, ProtocolContractViolation, TransportError

__all__ = [
    "DialogsError",
    "PeerKind",
    "ProtocolContractViolation",
    "ResponseShape",
    "TransportError",
]
