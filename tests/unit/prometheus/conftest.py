# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Shared fixtures for prometheus collection tests."""

import pytest

from promcollect.common.config import CollectorConfig
from promcollect.common.exceptions import FetchError
from promcollect.prometheus import DiscoveryCache, PrometheusCollector
from tests.unit.prometheus.helpers import (
    TEST_ENDPOINT,
    TEST_TIMESTAMP_NS,
    FakeFetcher,
)


@pytest.fixture
def sample_counter_metrics() -> str:
    """Sample Prometheus counter metrics."""
    return """# HELP http_requests_total Total HTTP requests
# TYPE http_requests_total counter
http_requests_total{method="GET",status="200"} 3.0
http_requests_total{method="POST",status="200"} 4.5
http_requests_total{method="GET",status="500"} 0.5
"""


@pytest.fixture
def sample_gauge_metrics() -> str:
    """Sample Prometheus gauge metrics."""
    return """# HELP memory_usage_bytes Current memory usage
# TYPE memory_usage_bytes gauge
memory_usage_bytes{type="heap"} 1073741824
memory_usage_bytes{type="stack"} 8388608
# HELP cpu_utilization CPU utilization ratio
# TYPE cpu_utilization gauge
cpu_utilization{cpu="0"} 0.85
"""


@pytest.fixture
def sample_summary_metrics() -> str:
    """Sample Prometheus summary metrics with two label sets and one NaN quantile."""
    return """# HELP rpc_duration_seconds RPC duration summary
# TYPE rpc_duration_seconds summary
rpc_duration_seconds{service="auth",quantile="0.5"} 0.1
rpc_duration_seconds{service="auth",quantile="0.9"} 0.5
rpc_duration_seconds{service="auth",quantile="0.99"} NaN
rpc_duration_seconds_sum{service="auth"} 100.0
rpc_duration_seconds_count{service="auth"} 10
rpc_duration_seconds{service="billing",quantile="0.5"} 0.2
rpc_duration_seconds{service="billing",quantile="0.9"} 0.7
rpc_duration_seconds{service="billing",quantile="0.99"} 0.9
rpc_duration_seconds_sum{service="billing"} 20.0
rpc_duration_seconds_count{service="billing"} 5
"""


@pytest.fixture
def sample_histogram_metrics() -> str:
    """Sample Prometheus histogram metrics."""
    return """# HELP http_request_duration_seconds HTTP request duration
# TYPE http_request_duration_seconds histogram
http_request_duration_seconds_bucket{method="GET",le="0.1"} 100
http_request_duration_seconds_bucket{method="GET",le="+Inf"} 500
http_request_duration_seconds_sum{method="GET"} 125.5
http_request_duration_seconds_count{method="GET"} 500
"""


@pytest.fixture
def sample_snapshot(
    sample_counter_metrics: str,
    sample_gauge_metrics: str,
    sample_summary_metrics: str,
    sample_histogram_metrics: str,
) -> str:
    """A full snapshot containing every metric type."""
    return (
        sample_counter_metrics
        + sample_gauge_metrics
        + sample_summary_metrics
        + sample_histogram_metrics
    )


@pytest.fixture
def fake_fetcher(sample_snapshot: str) -> FakeFetcher:
    return FakeFetcher(sample_snapshot)


@pytest.fixture
def collector_config() -> CollectorConfig:
    return CollectorConfig(
        endpoint=TEST_ENDPOINT,
        multi_group_metrics=frozenset({"http_requests_total", "rpc_duration_seconds"}),
    )


@pytest.fixture
def collector(
    collector_config: CollectorConfig, fake_fetcher: FakeFetcher
) -> PrometheusCollector:
    return PrometheusCollector(
        collector_config,
        fetcher=fake_fetcher,
        cache=DiscoveryCache(),
        clock=lambda: TEST_TIMESTAMP_NS,
    )


@pytest.fixture
def unreachable_fetcher() -> FakeFetcher:
    return FakeFetcher(error=FetchError(TEST_ENDPOINT, "Connection refused"))
