# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from promcollect.common.constants import METRICS_PATH_SUFFIX


def normalize_metrics_endpoint_url(url: str) -> str:
    """Ensure metrics endpoint URL ends with /metrics suffix.

    Args:
        url: Base URL or full metrics URL (e.g., "http://localhost:8080" or
             "http://localhost:8080/metrics")

    Returns:
        URL ending with /metrics with trailing slashes removed
        (e.g., "http://localhost:8080/metrics")

    Raises:
        ValueError: If URL is empty or whitespace-only

    Examples:
        >>> normalize_metrics_endpoint_url("http://localhost:8080")
        "http://localhost:8080/metrics"
        >>> normalize_metrics_endpoint_url("http://localhost:8080/")
        "http://localhost:8080/metrics"
        >>> normalize_metrics_endpoint_url("http://localhost:8080/metrics")
        "http://localhost:8080/metrics"
    """
    if not url or not url.strip():
        raise ValueError("URL cannot be empty or whitespace-only")

    url = url.strip().rstrip("/")
    if not url.endswith(METRICS_PATH_SUFFIX):
        url = f"{url}{METRICS_PATH_SUFFIX}"
    return url


def quantile_key(quantile: float) -> str:
    """Tag key for a summary quantile, using the integer percent truncated toward zero.

    Examples:
        >>> quantile_key(0.5)
        "quantile_50"
        >>> quantile_key(0.999)
        "quantile_99"
    """
    return f"quantile_{int(quantile * 100)}"
