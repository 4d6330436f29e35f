# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from promcollect.prometheus.aggregator import TotalAggregator
from promcollect.prometheus.collector import PrometheusCollector, get_endpoint
from promcollect.prometheus.decoder import SampleDecoder
from promcollect.prometheus.discovery import (
    DiscoveryCache,
    DynamicDiscovery,
    StaticDiscovery,
)
from promcollect.prometheus.fetcher import HttpMetricsFetcher
from promcollect.prometheus.parser import parse_metric_families
from promcollect.prometheus.protocols import (
    DiscoveryProtocol,
    ErrorCallback,
    MetricsFetcherProtocol,
    RecordCallback,
)
from promcollect.prometheus.resolver import NamespaceResolver
from promcollect.prometheus.scheduler import CollectionScheduler
from promcollect.prometheus.sinks import JsonlRecordSink, serialize_record

__all__ = [
    "CollectionScheduler",
    "DiscoveryCache",
    "DiscoveryProtocol",
    "DynamicDiscovery",
    "ErrorCallback",
    "HttpMetricsFetcher",
    "JsonlRecordSink",
    "MetricsFetcherProtocol",
    "NamespaceResolver",
    "PrometheusCollector",
    "RecordCallback",
    "SampleDecoder",
    "StaticDiscovery",
    "TotalAggregator",
    "get_endpoint",
    "parse_metric_families",
    "serialize_record",
]
