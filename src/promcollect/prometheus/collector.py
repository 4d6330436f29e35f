# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import time
from collections.abc import Callable, Mapping, Sequence
from typing import Any

from typing_extensions import Self

from promcollect.common.config import CollectorConfig
from promcollect.common.constants import ENDPOINT_CONFIG_KEY, NAMESPACE_PREFIX
from promcollect.common.enums import DiscoveryMode
from promcollect.common.exceptions import (
    CollectionConfigurationError,
    ConfigurationError,
    FetchError,
    ParseError,
)
from promcollect.common.metric_utils import normalize_metrics_endpoint_url
from promcollect.common.mixins import CollectorLoggerMixin
from promcollect.common.models import ConfigPolicy, MetricFamily, MetricRecord
from promcollect.prometheus.aggregator import TotalAggregator
from promcollect.prometheus.decoder import SampleDecoder
from promcollect.prometheus.discovery import (
    DiscoveryCache,
    DynamicDiscovery,
    StaticDiscovery,
)
from promcollect.prometheus.fetcher import HttpMetricsFetcher
from promcollect.prometheus.parser import parse_metric_families
from promcollect.prometheus.protocols import DiscoveryProtocol, MetricsFetcherProtocol
from promcollect.prometheus.resolver import NamespaceResolver

__all__ = ["PrometheusCollector", "get_endpoint"]


def get_endpoint(config: Mapping[str, Any] | None) -> str:
    """Read the collection endpoint from a request's config, normalized to end in /metrics.

    Raises:
        ConfigurationError: If the config has no usable ``endpoint`` string
    """
    address = (config or {}).get(ENDPOINT_CONFIG_KEY)
    if not isinstance(address, str):
        raise ConfigurationError(
            f"Config key '{ENDPOINT_CONFIG_KEY}' must be a string, got {address!r}"
        )
    try:
        return normalize_metrics_endpoint_url(address)
    except ValueError as e:
        raise ConfigurationError(f"Invalid endpoint {address!r}: {e}") from e


class PrometheusCollector(CollectorLoggerMixin):
    """Collects Prometheus exposition metrics and translates them into host records.

    This is the surface the host calls:

    - ``get_metric_types()`` lists the metrics that can be requested.
    - ``collect_metrics(requested)`` runs one collection pass.
    - ``get_config_policy()`` describes the accepted configuration.

    A pass fetches the endpoint, parses the snapshot, decodes each requested
    family and appends totals for multi-group families. Fetch and parse
    failures degrade the pass to zero records with a warning, so the host's
    next scheduled pass acts as the retry.

    Args:
        config: Deployment configuration (default: ``CollectorConfig()``)
        fetcher: Snapshot fetcher (default: ``HttpMetricsFetcher()``)
        cache: Discovery cache (default: built from ``config.cache_file``)
        clock: Returns the current wall-clock time in nanoseconds
    """

    def __init__(
        self,
        config: CollectorConfig | None = None,
        fetcher: MetricsFetcherProtocol | None = None,
        cache: DiscoveryCache | None = None,
        clock: Callable[[], int] = time.time_ns,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self._config = config or CollectorConfig()
        self._fetcher = fetcher or HttpMetricsFetcher()
        self._cache = cache if cache is not None else DiscoveryCache(self._config.cache_file)
        self._clock = clock
        self._resolver = NamespaceResolver(
            decoder=SampleDecoder(),
            aggregator=TotalAggregator(self._config.multi_group_metrics),
            cache=self._cache,
        )
        self._discovery = self._create_discovery()

    @property
    def config(self) -> CollectorConfig:
        return self._config

    @property
    def cache(self) -> DiscoveryCache:
        return self._cache

    def _create_discovery(self) -> DiscoveryProtocol:
        if self._config.discovery_mode == DiscoveryMode.STATIC:
            return StaticDiscovery(self._config.static_metrics)
        return DynamicDiscovery(self._fetcher, self._config.endpoint, self._cache)

    async def initialize(self) -> None:
        """Load the discovery cache and open the fetcher's HTTP session."""
        self._cache.load()
        if isinstance(self._fetcher, HttpMetricsFetcher):
            await self._fetcher.initialize()

    async def close(self) -> None:
        """Persist the discovery cache and close the fetcher's HTTP session."""
        self._save_cache()
        if isinstance(self._fetcher, HttpMetricsFetcher):
            await self._fetcher.close()

    async def __aenter__(self) -> Self:
        await self.initialize()
        return self

    async def __aexit__(self, exc_type, exc_value, traceback) -> None:
        await self.close()

    def get_config_policy(self) -> ConfigPolicy:
        """Config policy with one optional ``endpoint`` string under the plugin namespace."""
        return ConfigPolicy().add_string_rule(
            NAMESPACE_PREFIX,
            ENDPOINT_CONFIG_KEY,
            required=False,
            default=self._config.endpoint,
        )

    def _apply_config_policy(self, config: Mapping[str, Any] | None) -> dict[str, Any]:
        """Fill keys missing from a request's config with the policy defaults."""
        defaults = {
            rule.key: rule.default
            for rule in self.get_config_policy().rules
            if rule.default is not None
        }
        return {**defaults, **(config or {})}

    async def get_metric_types(self) -> list[MetricRecord]:
        """List the metrics the host may request, using the configured discovery mode."""
        metric_types = await self._discovery.discover()
        self._save_cache()
        self.debug(lambda: f"Discovered {len(metric_types)} metric types")
        return metric_types

    async def fetch_families(self, endpoint: str) -> dict[str, MetricFamily]:
        """Fetch and parse one snapshot.

        Raises:
            FetchError: If the endpoint cannot be downloaded
            ParseError: If the snapshot is malformed
        """
        return parse_metric_families(await self._fetcher.fetch(endpoint))

    async def collect_metrics(
        self, requested: Sequence[MetricRecord]
    ) -> list[MetricRecord]:
        """Run one collection pass for the requested metrics.

        Every returned record carries the same timestamp, taken when the pass
        starts. The requested records are never modified.

        Raises:
            CollectionConfigurationError: If nothing was requested or no endpoint
                can be resolved. The request is attached unmodified.
        """
        if not requested:
            raise CollectionConfigurationError(
                "Array of metric types is empty, please check get_metric_types()",
                requested,
            )

        timestamp_ns = self._clock()

        try:
            endpoint = get_endpoint(self._apply_config_policy(requested[0].config))
        except ConfigurationError as e:
            raise CollectionConfigurationError(
                f"Unable to get endpoint: {e}", requested
            ) from e

        try:
            families = await self.fetch_families(endpoint)
        except (FetchError, ParseError) as e:
            self.warning(
                f"Unable to collect metrics, skipping to next cycle. endpoint: {endpoint}, error: {e}"
            )
            return []

        records = self._resolver.resolve(requested, families, timestamp_ns)
        self._save_cache()

        self.debug(
            lambda: f"Collected {len(records)} records for {len(requested)} requested metrics from {endpoint}"
        )
        return records

    def _save_cache(self) -> None:
        try:
            self._cache.save()
        except OSError as e:
            self.warning(f"Unable to save discovery cache to {self._cache.path}: {e!r}")
