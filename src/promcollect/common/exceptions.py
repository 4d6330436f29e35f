# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from promcollect.common.models.record_models import MetricRecord


class PromCollectError(Exception):
    """Base class for all exceptions raised by promcollect."""

    def __str__(self) -> str:
        """Return the string representation of the exception with the class name."""
        return super().__str__()


class ConfigurationError(PromCollectError):
    """Exception raised when something fails to configure, or there is a configuration error."""


class CollectionConfigurationError(ConfigurationError):
    """Exception raised when a collection pass cannot start because of its configuration.

    The requested metrics are echoed back exactly as the caller supplied them.
    """

    def __init__(self, message: str, requested: Sequence[MetricRecord]) -> None:
        self.requested = requested
        super().__init__(message)


class FetchError(PromCollectError):
    """Exception raised when the metrics endpoint is unreachable or returns a non-success status."""

    def __init__(self, url: str, message: str, status: int | None = None) -> None:
        self.url = url
        self.status = status
        super().__init__(f"Unable to download metrics from {url}: {message}")


class ParseError(PromCollectError):
    """Exception raised when a metrics snapshot is not valid Prometheus text exposition format."""
