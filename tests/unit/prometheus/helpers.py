# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Test helpers for prometheus collection tests."""

from promcollect.common.enums import PrometheusMetricType
from promcollect.common.models import (
    MetricFamily,
    MetricRecord,
    MetricSample,
    Namespace,
    SummaryData,
)

TEST_ENDPOINT = "http://localhost:8080/metrics"
TEST_TIMESTAMP_NS = 1_700_000_000_000_000_000


class FakeFetcher:
    """In-memory stand-in for HttpMetricsFetcher.

    Returns ``body`` for every fetch, or raises ``error`` when set. Every
    requested URL is recorded in ``urls``.
    """

    def __init__(self, body: bytes | str = b"", error: Exception | None = None):
        self.body = body.encode() if isinstance(body, str) else body
        self.error = error
        self.urls: list[str] = []

    async def fetch(self, url: str) -> bytes:
        self.urls.append(url)
        if self.error is not None:
            raise self.error
        return self.body


def request_for(*names: str, endpoint: str | None = TEST_ENDPOINT) -> list[MetricRecord]:
    """Requested records for family names under the plugin namespace."""
    config = {"endpoint": endpoint} if endpoint is not None else None
    return [
        MetricRecord(namespace=Namespace.for_family(name), config=config)
        for name in names
    ]


def counter_family(name: str, *values: float, label: str = "worker") -> MetricFamily:
    """Counter family with one sample per value, labeled ``{label}=<index>``."""
    return MetricFamily(
        name=name,
        type=PrometheusMetricType.COUNTER,
        description=f"{name} help",
        samples=[
            MetricSample(labels={label: str(i)}, value=value)
            for i, value in enumerate(values)
        ],
    )


def gauge_family(name: str, *values: float) -> MetricFamily:
    return MetricFamily(
        name=name,
        type=PrometheusMetricType.GAUGE,
        description=f"{name} help",
        samples=[
            MetricSample(labels={"instance": str(i)}, value=value)
            for i, value in enumerate(values)
        ],
    )


def summary_family(name: str, *summaries: SummaryData) -> MetricFamily:
    """Summary family with one sample per SummaryData, labeled ``shard=<index>``."""
    return MetricFamily(
        name=name,
        type=PrometheusMetricType.SUMMARY,
        description=f"{name} help",
        samples=[
            MetricSample(labels={"shard": str(i)}, summary=summary)
            for i, summary in enumerate(summaries)
        ],
    )
