"""JSON gateway transport over aiohttp."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import aiohttp
from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from ..config import TransportConfig
from ..core.exceptions import ProtocolContractViolation, TransportError
from ..models.functions import Request

logger = logging.getLogger(__name__)


class HTTPTransport:
    """Async transport posting each call to an HTTP gateway.

    Every call is sent as ``POST {base_url}/{request.METHOD}`` with the request
    fields as the JSON body; the JSON answer is validated into the request's
    response type.
    """

    def __init__(self, config: TransportConfig) -> None:
        self.config = config
        self.timeout = aiohttp.ClientTimeout(total=config.timeout)
        self._session: aiohttp.ClientSession | None = None
        self._adapters: dict[type[Request], TypeAdapter[Any]] = {}

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=self.timeout, headers=self.config.headers
            )
        return self._session

    def url_for(self, request: Request) -> str:
        return f"{self.config.base_url.rstrip('/')}/{request.METHOD}"

    async def invoke(self, request: Request) -> Any:
        """POST the request and decode the gateway's answer."""
        url = self.url_for(request)
        body = request.model_dump(mode="json")
        try:
            async with self.session.post(url, json=body) as response:
                response.raise_for_status()
                try:
                    payload = await response.json()
                except ValueError as e:
                    raise ProtocolContractViolation(
                        f"{request.METHOD} returned a body that is not JSON",
                        payload=await response.text(),
                    ) from e
        except aiohttp.ClientResponseError as e:
            logger.debug(
                "gateway_http_error",
                extra={
                    "method": request.METHOD,
                    "status_code": e.status,
                    "error_message": e.message,
                },
            )
            raise TransportError(
                f"{request.METHOD} failed with HTTP {e.status}: {e.message}",
                status_code=e.status,
            ) from e
        except aiohttp.ClientError as e:
            logger.debug(
                "gateway_connection_error",
                extra={"method": request.METHOD, "error_type": type(e).__name__},
            )
            raise TransportError(f"{request.METHOD} failed: {e}") from e
        except asyncio.TimeoutError as e:
            logger.debug(
                "gateway_connection_error",
                extra={"method": request.METHOD, "error_type": type(e).__name__},
            )
            raise TransportError(f"{request.METHOD} timed out") from e

        try:
            return self._adapter(type(request)).validate_python(payload)
        except PydanticValidationError as e:
            raise ProtocolContractViolation(
                f"{request.METHOD} returned an undecodable payload: {e}",
                payload=payload,
            ) from e

    def _adapter(self, request_type: type[Request]) -> TypeAdapter[Any]:
        adapter = self._adapters.get(request_type)
        if adapter is None:
            adapter = TypeAdapter(request_type.RESPONSE)
            self._adapters[request_type] = adapter
        return adapter

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> HTTPTransport:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
