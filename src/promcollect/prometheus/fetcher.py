# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
import asyncio
from http import HTTPStatus

import aiohttp
from typing_extensions import Self

from promcollect.common.environment import Environment
from promcollect.common.exceptions import FetchError
from promcollect.common.mixins import CollectorLoggerMixin

__all__ = ["HttpMetricsFetcher"]


class HttpMetricsFetcher(CollectorLoggerMixin):
    """Downloads Prometheus exposition snapshots over HTTP using aiohttp.

    The session is created by ``initialize()`` and closed by ``close()``, or
    managed with ``async with``. When ``fetch()`` is called without an
    initialized session, a temporary session is used for that single request.

    Args:
        timeout: Total timeout in seconds for one fetch (default: Environment.HTTP.TIMEOUT)
        connect_timeout: Connection timeout in seconds (default: Environment.HTTP.CONNECT_TIMEOUT)
    """

    def __init__(
        self,
        timeout: float | None = None,
        connect_timeout: float | None = None,
        **kwargs,
    ) -> None:
        self._timeout = timeout if timeout is not None else Environment.HTTP.TIMEOUT
        self._connect_timeout = (
            connect_timeout
            if connect_timeout is not None
            else Environment.HTTP.CONNECT_TIMEOUT
        )
        self._session: aiohttp.ClientSession | None = None
        super().__init__(**kwargs)

    @property
    def timeout(self) -> float:
        return self._timeout

    def _create_timeout(self) -> aiohttp.ClientTimeout:
        return aiohttp.ClientTimeout(
            total=self._timeout, connect=self._connect_timeout
        )

    async def initialize(self) -> None:
        """Create the aiohttp client session. Calling it twice is a no-op."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self._create_timeout())

    async def close(self) -> None:
        """Close the aiohttp client session."""
        if self._session:
            await self._session.close()
            self._session = None

    async def __aenter__(self) -> Self:
        await self.initialize()
        return self

    async def __aexit__(self, exc_type, exc_value, traceback) -> None:
        await self.close()

    async def fetch(self, url: str) -> bytes:
        """Fetch the raw snapshot from ``url`` and return the buffered body.

        Raises:
            FetchError: If the endpoint is unreachable, times out, or returns a
                status other than 200 OK.
        """
        # Snapshot session to avoid racing with close() setting it to None
        session = self._session
        if session is None or session.closed:
            async with aiohttp.ClientSession(
                timeout=self._create_timeout()
            ) as temp_session:
                return await self._fetch_with_session(temp_session, url)
        return await self._fetch_with_session(session, url)

    async def _fetch_with_session(
        self, session: aiohttp.ClientSession, url: str
    ) -> bytes:
        try:
            async with session.get(url) as response:
                if response.status != HTTPStatus.OK:
                    raise FetchError(
                        url,
                        f"Status code: {response.status} Response: {response.reason}",
                        status=response.status,
                    )
                body = await response.read()
        except aiohttp.ClientError as e:
            raise FetchError(url, f"{e!r}") from e
        except asyncio.TimeoutError as e:
            raise FetchError(url, f"request timed out after {self._timeout}s") from e

        self.trace(lambda: f"Fetched {len(body)} bytes from {url}")
        return body
