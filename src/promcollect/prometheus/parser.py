# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Adapter between prometheus_client's text parser and promcollect's exposition models."""

from collections import defaultdict

from prometheus_client.metrics_core import Metric
from prometheus_client.parser import text_string_to_metric_families

from promcollect.common.collector_logger import CollectorLogger
from promcollect.common.constants import (
    COUNT_SUFFIX,
    COUNTER_TOTAL_SUFFIX,
    QUANTILE_LABEL,
    SUM_SUFFIX,
)
from promcollect.common.enums import PrometheusMetricType
from promcollect.common.exceptions import ParseError
from promcollect.common.models import MetricFamily, MetricSample, SummaryData

__all__ = ["exposition_name", "parse_metric_families"]

_logger = CollectorLogger(__name__)


def exposition_name(
    family: Metric, declared_counters: frozenset[str] = frozenset()
) -> str:
    """Name of the family as it appears in the exposition text.

    prometheus_client strips ``_total`` from counter family names, so the
    declared name is recovered from the snapshot's ``# TYPE`` lines.
    """
    if PrometheusMetricType(family.type) != PrometheusMetricType.COUNTER:
        return family.name
    if family.name in declared_counters:
        return family.name
    return f"{family.name}{COUNTER_TOTAL_SUFFIX}"


def _declared_counter_names(text: str) -> frozenset[str]:
    """Family names declared as ``# TYPE <name> counter``."""
    names = set()
    for line in text.splitlines():
        parts = line.split(None, 3)
        if len(parts) == 4 and parts[:2] == ["#", "TYPE"] and parts[3] == "counter":
            names.add(parts[2])
    return frozenset(names)


def parse_metric_families(data: bytes | str) -> dict[str, MetricFamily]:
    """Parse a Prometheus text-format snapshot into metric families.

    Args:
        data: Raw snapshot, as returned by the fetcher

    Returns:
        Families keyed by exposition name, in snapshot order.

    Raises:
        ParseError: If the body is not valid UTF-8 or not valid exposition format
    """
    try:
        text = data.decode("utf-8") if isinstance(data, bytes) else data
    except UnicodeDecodeError as e:
        raise ParseError(f"Metrics body is not valid UTF-8: {e}") from e

    declared_counters = _declared_counter_names(text)
    families: dict[str, MetricFamily] = {}
    try:
        for family in text_string_to_metric_families(text):
            metric_type = PrometheusMetricType(family.type)
            match metric_type:
                case PrometheusMetricType.SUMMARY:
                    samples = _process_summary_family(family)
                case (
                    PrometheusMetricType.COUNTER
                    | PrometheusMetricType.GAUGE
                    | PrometheusMetricType.UNKNOWN
                ):
                    samples = _process_simple_family(family)
                case _:
                    # Kept for discovery, but these types are never decoded
                    samples = []

            name = exposition_name(family, declared_counters)
            families[name] = MetricFamily(
                name=name,
                type=metric_type,
                description=family.documentation or "",
                samples=samples,
            )
    except (ValueError, IndexError, KeyError) as e:
        raise ParseError(f"Unable to parse metrics: {e!r}") from e

    _logger.trace(lambda: f"Parsed {len(families)} metric families")
    return families


def _process_simple_family(family: Metric) -> list[MetricSample]:
    """Process counter, gauge, or untyped samples with de-duplication.

    Samples with identical label sets collapse to the last value, keeping the
    position of the first occurrence.
    """
    samples_by_labels: dict[tuple, float] = {}

    for sample in family.samples:
        label_key = tuple(sample.labels.items())
        samples_by_labels[label_key] = sample.value

    return [
        MetricSample(labels=dict(label_tuple), value=value)
        for label_tuple, value in samples_by_labels.items()
    ]


def _process_summary_family(family: Metric) -> list[MetricSample]:
    """Group summary samples by their labels (minus ``quantile``) into SummaryData.

    A summary missing its ``_count`` or ``_sum`` line reports 0 for that component.
    """
    summaries: dict[tuple, SummaryData] = defaultdict(SummaryData)

    for sample in family.samples:
        base_labels = {k: v for k, v in sample.labels.items() if k != QUANTILE_LABEL}
        label_key = tuple(base_labels.items())

        if sample.name == family.name:
            quantile = float(sample.labels.get(QUANTILE_LABEL, "0"))
            summaries[label_key].quantiles[quantile] = sample.value
        elif sample.name.endswith(SUM_SUFFIX):
            summaries[label_key].sum = sample.value
        elif sample.name.endswith(COUNT_SUFFIX):
            summaries[label_key].count = sample.value

    samples = []
    for label_tuple, summary_data in summaries.items():
        if summary_data.sum is None or summary_data.count is None:
            _logger.debug(
                lambda name=family.name, summary=summary_data: f"Summary {name} is missing sum or count: {summary}"
            )
            summary_data.sum = summary_data.sum or 0.0
            summary_data.count = summary_data.count or 0.0
        samples.append(MetricSample(labels=dict(label_tuple), summary=summary_data))

    return samples
