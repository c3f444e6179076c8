"""Transport protocol consumed by the dialogs runtime.

The runtime issues every remote call through ``Transport.invoke``. Framing,
encryption and retries are the transport's business; the runtime only awaits
the decoded response and lets any exception propagate unchanged.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from ..models.functions import Request


@runtime_checkable
class Transport(Protocol):
    """Anything that can execute a remote call and return its decoded result."""

    async def invoke(self, request: Request) -> Any:
        """Execute ``request`` and return a value of ``request.RESPONSE``.

        Raises:
            TransportError: When the call could not be completed
        """
        ...
