# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING

from promcollect.common.constants import COUNTER_TOTAL_SUFFIX
from promcollect.common.enums import PrometheusMetricType
from promcollect.common.exceptions import ConfigurationError
from promcollect.common.mixins import CollectorLoggerMixin
from promcollect.common.models import MetricFamily, MetricRecord
from promcollect.prometheus.aggregator import TotalAggregator
from promcollect.prometheus.decoder import SampleDecoder

if TYPE_CHECKING:
    from promcollect.prometheus.discovery import DiscoveryCache

__all__ = ["NamespaceResolver"]


class NamespaceResolver(CollectorLoggerMixin):
    """Joins the metrics the host asked for with the families in a snapshot.

    The last namespace segment of each requested record names a family. Every
    sample of that family is decoded, and TOTAL records are appended for
    multi-group families. Requested families missing from the snapshot yield
    no records.

    When a discovery cache is given, every family seen in a snapshot is
    written through to it.
    """

    def __init__(
        self,
        decoder: SampleDecoder | None = None,
        aggregator: TotalAggregator | None = None,
        cache: DiscoveryCache | None = None,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self._decoder = decoder or SampleDecoder()
        self._aggregator = aggregator or TotalAggregator()
        self._cache = cache

    @staticmethod
    def find_family(
        name: str, families: Mapping[str, MetricFamily]
    ) -> MetricFamily | None:
        """Look up a family by name, also accepting a counter's name without ``_total``."""
        family = families.get(name)
        if family is not None:
            return family
        family = families.get(f"{name}{COUNTER_TOTAL_SUFFIX}")
        if family is not None and family.type == PrometheusMetricType.COUNTER:
            return family
        return None

    def resolve(
        self,
        requested: Sequence[MetricRecord],
        families: Mapping[str, MetricFamily],
        timestamp_ns: int,
    ) -> list[MetricRecord]:
        """Decode the requested families of one snapshot into output records.

        Args:
            requested: Records naming the metrics to collect. Never modified.
            families: Parsed snapshot keyed by family name
            timestamp_ns: Pass start time, stamped on every output record

        Raises:
            ConfigurationError: If ``requested`` is empty
        """
        if not requested:
            raise ConfigurationError("No metrics were requested, nothing to resolve")

        if self._cache is not None:
            self._cache.update(families.values())

        records: list[MetricRecord] = []
        for request in requested:
            family = self.find_family(request.namespace.last, families)
            if family is None:
                self.debug(
                    lambda request=request: f"Metric family {request.namespace.last} is absent from the snapshot, skipping"
                )
                continue
            records.extend(self._resolve_family(request, family, timestamp_ns))

        return records

    def _resolve_family(
        self, request: MetricRecord, family: MetricFamily, timestamp_ns: int
    ) -> list[MetricRecord]:
        family_records = [
            MetricRecord(
                namespace=request.namespace,
                timestamp_ns=timestamp_ns,
                description=family.description,
                unit=decoded.unit,
                data=decoded.value,
                tags=decoded.tags,
            )
            for sample in family.samples
            for decoded in self._decoder.decode(family, sample)
        ]

        if self._aggregator.is_multi_group(family):
            family_records.extend(self._aggregator.aggregate(family, family_records))

        return family_records
