# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import math

import pytest

from promcollect.common.enums import PrometheusMetricType
from promcollect.common.models import MetricFamily, MetricSample, SummaryData
from promcollect.prometheus.decoder import SampleDecoder
from tests.unit.prometheus.helpers import counter_family, gauge_family, summary_family


@pytest.fixture
def decoder() -> SampleDecoder:
    return SampleDecoder()


class TestSampleDecoderSupports:
    @pytest.mark.parametrize(
        "metric_type,expected",
        [
            (PrometheusMetricType.COUNTER, True),
            (PrometheusMetricType.GAUGE, True),
            (PrometheusMetricType.SUMMARY, True),
            (PrometheusMetricType.HISTOGRAM, False),
            (PrometheusMetricType.INFO, False),
            (PrometheusMetricType.UNKNOWN, False),
        ],
    )  # fmt: skip
    def test_supports(self, decoder, metric_type, expected):
        assert decoder.supports(metric_type) is expected


class TestDecodeSimpleTypes:
    def test_decode_counter(self, decoder):
        family = counter_family("http_requests_total", 3.0)

        decoded = decoder.decode(family, family.samples[0])

        assert len(decoded) == 1
        assert decoded[0].value == 3.0
        assert decoded[0].tags == {"worker": "0"}
        assert decoded[0].unit is None

    def test_decode_gauge_without_unit(self, decoder):
        family = gauge_family("cpu_utilization", 0.85)

        decoded = decoder.decode(family, family.samples[0])

        assert decoded[0].value == 0.85
        assert decoded[0].unit is None

    @pytest.mark.parametrize(
        "name",
        ["memory_usage_bytes", "bytes_in_flight", "network_rx_bytes_total"],
    )  # fmt: skip
    def test_decode_gauge_with_bytes_in_name_has_byte_unit(self, decoder, name):
        family = gauge_family(name, 1024.0)

        decoded = decoder.decode(family, family.samples[0])

        assert decoded[0].unit == "B"

    def test_counter_with_bytes_in_name_has_no_unit(self, decoder):
        family = counter_family("network_rx_bytes_total", 1024.0)

        decoded = decoder.decode(family, family.samples[0])

        assert decoded[0].unit is None

    def test_decoded_tags_are_a_copy_of_labels(self, decoder):
        family = gauge_family("cpu_utilization", 0.5)
        sample = family.samples[0]

        decoded = decoder.decode(family, sample)
        decoded[0].tags["extra"] = "x"

        assert "extra" not in sample.labels


class TestDecodeSummary:
    def test_decode_summary_order(self, decoder):
        family = summary_family(
            "rpc_duration_seconds",
            SummaryData(count=10.0, sum=100.0, quantiles={0.9: 0.5, 0.5: 0.1}),
        )

        decoded = decoder.decode(family, family.samples[0])

        assert [(d.tags["summary"], d.value) for d in decoded] == [
            ("count", 10.0),
            ("sum", 100.0),
            ("quantile_50", 0.1),
            ("quantile_90", 0.5),
        ]

    def test_summary_tags_keep_sample_labels(self, decoder):
        family = summary_family(
            "rpc_duration_seconds", SummaryData(count=1.0, sum=2.0, quantiles={})
        )

        decoded = decoder.decode(family, family.samples[0])

        assert all(d.tags["shard"] == "0" for d in decoded)
        assert all(d.unit is None for d in decoded)

    def test_nan_quantile_is_skipped(self, decoder, caplog):
        family = summary_family(
            "rpc_duration_seconds",
            SummaryData(
                count=10.0, sum=100.0, quantiles={0.5: 0.1, 0.99: float("nan")}
            ),
        )

        decoded = decoder.decode(family, family.samples[0])

        keys = [d.tags["summary"] for d in decoded]
        assert keys == ["count", "sum", "quantile_50"]
        assert not any(math.isnan(d.value) for d in decoded)
        assert "quantile_99" in caplog.text
        assert "NaN" in caplog.text

    @pytest.mark.parametrize(
        "bad_quantile",
        [math.inf, -math.inf, math.nan, 1.5, -0.1],
    )  # fmt: skip
    def test_quantile_outside_unit_interval_is_skipped(
        self, decoder, caplog, bad_quantile
    ):
        family = summary_family(
            "rpc_duration_seconds",
            SummaryData(
                count=10.0, sum=100.0, quantiles={bad_quantile: 1.0, 0.9: 0.5}
            ),
        )

        decoded = decoder.decode(family, family.samples[0])

        assert [(d.tags["summary"], d.value) for d in decoded] == [
            ("count", 10.0),
            ("sum", 100.0),
            ("quantile_90", 0.5),
        ]
        assert "not a fraction between 0 and 1" in caplog.text

    def test_quantiles_with_same_percent_later_one_wins(self, decoder):
        family = summary_family(
            "rpc_duration_seconds",
            SummaryData(count=1.0, sum=1.0, quantiles={0.995: 0.8, 0.99: 0.7}),
        )

        decoded = decoder.decode(family, family.samples[0])

        quantiles = [d for d in decoded if d.tags["summary"].startswith("quantile_")]
        assert len(quantiles) == 1
        assert quantiles[0].tags["summary"] == "quantile_99"
        assert quantiles[0].value == 0.8

    def test_summary_without_data_decodes_to_nothing(self, decoder):
        family = MetricFamily(
            name="rpc_duration_seconds",
            type=PrometheusMetricType.SUMMARY,
            samples=[MetricSample(labels={}, value=1.0)],
        )

        assert decoder.decode(family, family.samples[0]) == []


class TestDecodeUnsupportedTypes:
    @pytest.mark.parametrize(
        "metric_type",
        [PrometheusMetricType.HISTOGRAM, PrometheusMetricType.UNKNOWN],
    )  # fmt: skip
    def test_unsupported_type_decodes_to_nothing(self, decoder, metric_type):
        family = MetricFamily(
            name="some_metric",
            type=metric_type,
            samples=[MetricSample(labels={}, value=1.0)],
        )

        assert decoder.decode(family, family.samples[0]) == []
