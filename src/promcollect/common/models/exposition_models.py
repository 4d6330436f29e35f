# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Typed view of one parsed Prometheus text-format snapshot."""

from pydantic import Field

from promcollect.common.enums import PrometheusMetricType
from promcollect.common.models.base_models import PromCollectBaseModel


class SummaryData(PromCollectBaseModel):
    """Structured summary data with quantiles, sum, and count."""

    count: float | None = Field(
        default=None, description="Total number of observations"
    )
    sum: float | None = Field(default=None, description="Sum of all observed values")
    quantiles: dict[float, float] = Field(
        default_factory=dict,
        description="Quantile fraction to value {quantile: value}, in exposition order. Values may be NaN.",
    )


class MetricSample(PromCollectBaseModel):
    """Single metric sample with labels and a type-specific payload."""

    labels: dict[str, str] = Field(
        default_factory=dict,
        description="Metric labels (excluding the summary quantile label)",
    )
    value: float | None = Field(
        default=None, description="Simple metric value (counter/gauge)"
    )
    summary: SummaryData | None = Field(
        default=None, description="Summary data if metric is summary type"
    )


class MetricFamily(PromCollectBaseModel):
    """Group of related samples with the same name and type."""

    name: str = Field(description="Family name as it appears in the exposition text")
    type: PrometheusMetricType = Field(description="Metric type as enum")
    description: str = Field(default="", description="Metric description from HELP text")
    samples: list[MetricSample] = Field(
        default_factory=list, description="Samples in exposition order"
    )
