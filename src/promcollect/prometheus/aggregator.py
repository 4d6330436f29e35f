# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from collections.abc import Iterable

from promcollect.common.constants import (
    COUNTER_TOTAL_SUFFIX,
    SUMMARY_TAG,
    TOTAL_TAG,
    TOTAL_TAG_VALUE,
)
from promcollect.common.enums import PrometheusMetricType, SummaryComponent
from promcollect.common.mixins import CollectorLoggerMixin
from promcollect.common.models import MetricFamily, MetricRecord

__all__ = ["TotalAggregator"]


class TotalAggregator(CollectorLoggerMixin):
    """Sums the per-sample records of multi-group families into TOTAL records.

    A multi-group family is one logical value spread over many labeled
    samples (for example one counter per worker). Totals are recomputed from
    the records of the current pass only.

    Args:
        multi_group_metrics: Family names to aggregate. Counters may be listed
            with or without their ``_total`` suffix.
    """

    def __init__(self, multi_group_metrics: Iterable[str] = (), **kwargs) -> None:
        super().__init__(**kwargs)
        self._multi_group_metrics = frozenset(multi_group_metrics)

    @property
    def multi_group_metrics(self) -> frozenset[str]:
        return self._multi_group_metrics

    def is_multi_group(self, family: MetricFamily) -> bool:
        if family.name in self._multi_group_metrics:
            return True
        return (
            family.type == PrometheusMetricType.COUNTER
            and family.name.removesuffix(COUNTER_TOTAL_SUFFIX)
            in self._multi_group_metrics
        )

    def aggregate(
        self, family: MetricFamily, records: list[MetricRecord]
    ) -> list[MetricRecord]:
        """Build the TOTAL records for one family from this pass's decoded records.

        Counters produce one total. Summaries produce a count total and a sum
        total; quantiles are never summed. Other types produce nothing, as does
        a family with no decoded records.
        """
        if not records:
            return []

        match family.type:
            case PrometheusMetricType.COUNTER:
                totals = [
                    self._total_record(
                        records[0], sum(record.data for record in records)
                    )
                ]
            case PrometheusMetricType.SUMMARY:
                totals = [
                    self._total_record(
                        records[0],
                        self._sum_component(records, component),
                        {SUMMARY_TAG: component.value},
                    )
                    for component in (SummaryComponent.COUNT, SummaryComponent.SUM)
                ]
            case _:
                self.debug(
                    lambda: f"No totals defined for {family.type} family {family.name}"
                )
                return []

        self.trace(lambda: f"Aggregated {len(records)} records of {family.name}: {totals}")
        return totals

    @staticmethod
    def _sum_component(
        records: list[MetricRecord], component: SummaryComponent
    ) -> float:
        return sum(
            record.data
            for record in records
            if record.tags.get(SUMMARY_TAG) == component.value
        )

    @staticmethod
    def _total_record(
        template: MetricRecord, value: float, extra_tags: dict[str, str] | None = None
    ) -> MetricRecord:
        return MetricRecord(
            namespace=template.namespace,
            timestamp_ns=template.timestamp_ns,
            description=template.description,
            data=value,
            tags={TOTAL_TAG: TOTAL_TAG_VALUE, **(extra_tags or {})},
            version=template.version,
        )
