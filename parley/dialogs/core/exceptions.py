"""Custom exception hierarchy."""

from __future__ import annotations


class DialogsError(Exception):
    """Base exception for all library errors."""

    pass


class TransportError(DialogsError):
    """Error raised by a transport while invoking a remote call.

    The pagination core treats this as opaque and always propagates it
    unchanged; it is never retried or swallowed.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code


class ProtocolContractViolation(DialogsError):
    """The remote endpoint answered outside of its documented contract.

    Raised when a ``NotModified`` dialogs response arrives for a request sent
    with ``hash = 0``, or when a payload carries a variant outside of the
    closed set this library decodes. Not recoverable.
    """

    def __init__(self, message: str, payload: object | None = None) -> None:
        super().__init__(message)
        self.payload = payload
