# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
import math
from collections.abc import Callable

from promcollect.common.constants import BYTES_UNIT, SUMMARY_TAG
from promcollect.common.enums import PrometheusMetricType, SummaryComponent
from promcollect.common.metric_utils import quantile_key
from promcollect.common.mixins import CollectorLoggerMixin
from promcollect.common.models import DecodedValue, MetricFamily, MetricSample

__all__ = ["SampleDecoder"]

SampleDecodeFunc = Callable[[MetricFamily, MetricSample], list[DecodedValue]]


class SampleDecoder(CollectorLoggerMixin):
    """Converts one labeled sample into the values that become output records.

    Decoding is dispatched on the family's ``PrometheusMetricType``:

    - GAUGE: one value. Unit ``"B"`` if the family name contains ``bytes``.
    - COUNTER: one value.
    - SUMMARY: ``count``, then ``sum``, then one value per non-NaN quantile in
      ascending order, each tagged ``summary=<component>``. Quantiles outside
      [0, 1] are skipped.

    Any other type decodes to nothing.
    """

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._decoders: dict[PrometheusMetricType, SampleDecodeFunc] = {
            PrometheusMetricType.GAUGE: self._decode_gauge,
            PrometheusMetricType.COUNTER: self._decode_counter,
            PrometheusMetricType.SUMMARY: self._decode_summary,
        }

    def supports(self, metric_type: PrometheusMetricType) -> bool:
        return metric_type in self._decoders

    def decode(self, family: MetricFamily, sample: MetricSample) -> list[DecodedValue]:
        """Decode one sample of ``family`` into zero or more values."""
        decode_func = self._decoders.get(family.type)
        if decode_func is None:
            self.debug(
                lambda: f"Skipping sample of {family.type} family {family.name}: type is not decoded"
            )
            return []
        return decode_func(family, sample)

    def _decode_gauge(
        self, family: MetricFamily, sample: MetricSample
    ) -> list[DecodedValue]:
        unit = BYTES_UNIT if "bytes" in family.name else None
        return [DecodedValue(sample.value, dict(sample.labels), unit)]

    def _decode_counter(
        self, family: MetricFamily, sample: MetricSample
    ) -> list[DecodedValue]:
        return [DecodedValue(sample.value, dict(sample.labels))]

    def _decode_summary(
        self, family: MetricFamily, sample: MetricSample
    ) -> list[DecodedValue]:
        summary = sample.summary
        if summary is None:
            self.warning(f"Summary family {family.name} has a sample without summary data")
            return []

        values: dict[str, float] = {
            SummaryComponent.COUNT.value: summary.count or 0.0,
            SummaryComponent.SUM.value: summary.sum or 0.0,
        }
        valid_quantiles = []
        for quantile in summary.quantiles:
            # Also rejects NaN
            if 0.0 <= quantile <= 1.0:
                valid_quantiles.append(quantile)
            else:
                self.warning(
                    f"Skipping quantile {quantile} of metric {family.name}: "
                    "not a fraction between 0 and 1"
                )

        for quantile in sorted(valid_quantiles):
            key = quantile_key(quantile)
            value = summary.quantiles[quantile]
            if math.isnan(value):
                self.warning(
                    f"Skipping to write metric {family.name} {key} as its value is NaN"
                )
                continue
            # Quantiles truncating to the same percent share a key; the later one wins
            values[key] = value

        return [
            DecodedValue(value, {**sample.labels, SUMMARY_TAG: key})
            for key, value in values.items()
        ]
