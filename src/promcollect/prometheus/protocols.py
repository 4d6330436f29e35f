# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from collections.abc import Awaitable, Callable
from typing import Protocol, runtime_checkable

from promcollect.common.models import ErrorDetails, MetricRecord

RecordCallback = Callable[[list[MetricRecord], str], Awaitable[None]]
ErrorCallback = Callable[[ErrorDetails, str], Awaitable[None]]


@runtime_checkable
class MetricsFetcherProtocol(Protocol):
    """Retrieves a raw exposition-format snapshot from an address."""

    async def fetch(self, url: str) -> bytes:
        """Return the full response body.

        Raises:
            FetchError: If the endpoint is unreachable or does not return success.
        """
        ...


@runtime_checkable
class DiscoveryProtocol(Protocol):
    """Enumerates the metric identifiers a host may request."""

    async def discover(self) -> list[MetricRecord]: ...
