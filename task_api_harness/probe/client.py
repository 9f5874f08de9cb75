"""HTTP probe issuing requests against the task API."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from typing import Any

import aiohttp

from task_api_harness.errors import TransportFailure
from task_api_harness.probe.config import ProbeConfig
from task_api_harness.probe.response import ProbeResponse

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class HttpProbe:
    """Issues one request at a time against a fixed base URL."""

    config: ProbeConfig
    session: aiohttp.ClientSession = field(repr=False)

    @classmethod
    @asynccontextmanager
    async def from_config(
        cls, config: ProbeConfig
    ) -> AsyncGenerator["HttpProbe", None]:
        """Create probe with managed session lifecycle."""
        async with aiohttp.ClientSession(
            base_url=config.base_url,
            timeout=aiohttp.ClientTimeout(total=config.timeout),
        ) as session:
            yield cls(config=config, session=session)

    async def execute(
        self, method: str, path: str, body: Any | None = None
    ) -> ProbeResponse:
        """Send a request and wait for the complete response.

        Args:
            method: HTTP method, e.g. "GET"
            path: Path relative to the base URL, e.g. "user/123"
            body: Optional JSON-serializable request body

        Returns:
            Status code and raw body of the response, whatever the status

        Raises:
            TransportFailure: If the request could not be completed

        """
        url = path.lstrip("/")
        kwargs: dict[str, Any] = {}
        if body is not None:
            kwargs["json"] = body

        try:
            async with self.session.request(method, url, **kwargs) as response:
                raw_body = await response.read()
                status = response.status
        except (aiohttp.ClientError, TimeoutError) as exc:
            raise TransportFailure(
                f"{method} /{url} failed: {str(exc) or type(exc).__name__}"
            ) from exc

        log.debug("%s /%s -> %d", method, url, status)
        return ProbeResponse(status_code=status, raw_body=raw_body)
