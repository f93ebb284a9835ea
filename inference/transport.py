"""
HTTP transport with a hard timeout.

One call = one request. Non-2xx answers come back as HttpResponse data;
only timeouts and network failures raise, and both raise TransportError.
"""

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, Optional

import httpx

from .errors import TransportError
from .types import HttpResponse

logger = logging.getLogger(__name__)


class HttpTransport:
    """
    Issues single HTTP requests through httpx.

    Args:
        client: Optional shared AsyncClient. When given it is used as-is and
                never closed here; otherwise each call opens and closes its own.
    """

    def __init__(self, client: Optional[httpx.AsyncClient] = None):
        self._client = client

    @asynccontextmanager
    async def _client_scope(self) -> AsyncIterator[httpx.AsyncClient]:
        if self._client is not None:
            yield self._client
            return
        async with httpx.AsyncClient() as client:
            yield client

    async def call(
        self,
        method: str,
        url: str,
        *,
        headers: Optional[Dict[str, str]] = None,
        json_body: Optional[Any] = None,
        timeout: float = 30.0,
    ) -> HttpResponse:
        """
        Send one request and read the whole body as text.

        The timeout bounds the wait for response headers; httpx's own
        per-read timeout bounds the body read.

        Raises:
            TransportError: timeout or network-level failure
        """
        try:
            async with self._client_scope() as client:
                request = client.build_request(
                    method,
                    url,
                    headers=headers,
                    json=json_body,
                    timeout=timeout,
                )
                response = await asyncio.wait_for(
                    client.send(request, stream=True), timeout=timeout
                )
                try:
                    await response.aread()
                finally:
                    await response.aclose()
        except (asyncio.TimeoutError, httpx.TimeoutException) as e:
            raise TransportError(
                "timeout", f"{method} request timed out after {timeout}s"
            ) from e
        except httpx.RequestError as e:
            raise TransportError(
                "network", f"{method} request failed: {type(e).__name__}: {e}"
            ) from e

        logger.debug(
            f"{method} {response.request.url.path} -> {response.status_code}",
            extra={"status_code": response.status_code},
        )
        return HttpResponse(status_code=response.status_code, raw_body=response.text)
