"""HTTP execution of prepared requests."""

import asyncio
from collections.abc import Mapping
from dataclasses import dataclass, field

import aiohttp
from yarl import URL

from ..utils.logger import DebugLogger, logger
from .request import PreparedRequest


@dataclass
class RawResponse:
    """Status, headers and fully read body of one HTTP exchange."""

    status: int
    reason: str = ""
    headers: Mapping[str, str] = field(default_factory=dict)
    body: bytes = b""


class Transport:
    """Executes prepared requests on an aiohttp session."""

    def __init__(self, session: aiohttp.ClientSession, debug_logger: DebugLogger | None = None):
        self.session = session
        self.debug_logger = debug_logger

    async def execute(self, request: PreparedRequest) -> RawResponse:
        """
        Send a prepared request and read the whole response.

        The response is always released, whatever its status.

        Args:
            request: Signed or public request

        Returns:
            RawResponse

        Raises:
            aiohttp.ClientError: On network failure (unwrapped)
            asyncio.TimeoutError: When the session's timeout elapses
        """
        if self.debug_logger:
            self.debug_logger.debug("Request url: %s", request.url)

        try:
            # The query string is already encoded and signed; keep it byte-exact
            async with self.session.request(
                method=request.method,
                url=URL(request.url, encoded=True),
                headers=request.headers,
                data=request.body,
            ) as response:
                body = await response.read()
                raw = RawResponse(
                    status=response.status,
                    reason=response.reason or "",
                    headers=response.headers,
                    body=body,
                )
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error(f"REST request failed: {request.method} {request.url} - {e!r}")
            raise

        if self.debug_logger:
            self.debug_logger.debug(
                "Response: status=%s headers=%s", raw.status, dict(raw.headers)
            )
            self.debug_logger.debug("Body: %s", raw.body.decode("utf-8", errors="replace"))

        return raw
