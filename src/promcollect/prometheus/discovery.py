# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Metric discovery: answering "which metrics exist" for the host."""

from collections.abc import Iterable
from pathlib import Path

import orjson

from promcollect.common.enums import PrometheusMetricType
from promcollect.common.exceptions import FetchError, ParseError
from promcollect.common.mixins import CollectorLoggerMixin
from promcollect.common.models import MetricFamily, MetricRecord, Namespace
from promcollect.prometheus.parser import parse_metric_families
from promcollect.prometheus.protocols import MetricsFetcherProtocol

__all__ = ["DiscoveryCache", "DynamicDiscovery", "StaticDiscovery"]


class DiscoveryCache(CollectorLoggerMixin):
    """Known metric family names and their types, kept across collection passes.

    The cache is filled from every parsed snapshot and, when a ``path`` is
    given, persisted as a JSON object ``{"family_name": "type", ...}`` so that
    discovery can answer even when the endpoint is down.
    """

    def __init__(self, path: Path | str | None = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self._path = Path(path) if path is not None else None
        self._families: dict[str, PrometheusMetricType] = {}
        self._dirty = False

    @property
    def path(self) -> Path | None:
        return self._path

    @property
    def dirty(self) -> bool:
        """True if there are changes that have not been saved."""
        return self._dirty

    def __len__(self) -> int:
        return len(self._families)

    def __contains__(self, name: object) -> bool:
        return name in self._families

    def load(self) -> None:
        """Load cached names from ``path``. A missing file leaves the cache empty."""
        if self._path is None or not self._path.exists():
            return
        try:
            raw = orjson.loads(self._path.read_bytes())
        except (OSError, orjson.JSONDecodeError) as e:
            self.warning(f"Unable to load discovery cache from {self._path}: {e!r}")
            return
        if not isinstance(raw, dict):
            self.warning(
                f"Ignoring discovery cache {self._path}: expected a JSON object, got {type(raw).__name__}"
            )
            return

        self._families = {
            name: PrometheusMetricType(metric_type) for name, metric_type in raw.items()
        }
        self._dirty = False
        self.debug(
            lambda: f"Loaded {len(self._families)} metric names from {self._path}"
        )

    def update(self, families: Iterable[MetricFamily]) -> bool:
        """Record every family in ``families``. Returns True if anything changed."""
        changed = False
        for family in families:
            if self._families.get(family.name) != family.type:
                self._families[family.name] = family.type
                changed = True
        self._dirty = self._dirty or changed
        return changed

    def names(self) -> list[str]:
        """Known family names, in the order they were first seen."""
        return list(self._families)

    def get(self, name: str) -> PrometheusMetricType | None:
        return self._families.get(name)

    def clear(self) -> None:
        self._dirty = self._dirty or bool(self._families)
        self._families.clear()

    def save(self) -> None:
        """Persist the cache to ``path`` if it has unsaved changes."""
        if self._path is None or not self._dirty:
            return
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_bytes(
            orjson.dumps(
                {name: str(metric_type) for name, metric_type in self._families.items()},
                option=orjson.OPT_INDENT_2,
            )
        )
        self._dirty = False
        self.debug(lambda: f"Saved {len(self._families)} metric names to {self._path}")


def _metric_type_record(name: str) -> MetricRecord:
    return MetricRecord(namespace=Namespace.for_family(name))


class StaticDiscovery(CollectorLoggerMixin):
    """Returns a fixed, pre-declared list of metrics."""

    def __init__(self, metric_names: Iterable[str], **kwargs) -> None:
        super().__init__(**kwargs)
        self._metric_names = list(metric_names)

    async def discover(self) -> list[MetricRecord]:
        return [_metric_type_record(name) for name in self._metric_names]


class DynamicDiscovery(CollectorLoggerMixin):
    """Lists every family exposed by an endpoint, via one fetch and parse.

    Discovered names are written to the cache. If the endpoint cannot be
    fetched or parsed, the cached names are returned instead; with an empty
    cache the error propagates.
    """

    def __init__(
        self,
        fetcher: MetricsFetcherProtocol,
        endpoint: str,
        cache: DiscoveryCache | None = None,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self._fetcher = fetcher
        self._endpoint = endpoint
        self._cache = cache if cache is not None else DiscoveryCache()

    @property
    def endpoint(self) -> str:
        return self._endpoint

    async def discover(self) -> list[MetricRecord]:
        try:
            families = parse_metric_families(await self._fetcher.fetch(self._endpoint))
        except (FetchError, ParseError) as e:
            if not len(self._cache):
                raise
            self.warning(
                f"Unable to discover metrics from {self._endpoint}, "
                f"using {len(self._cache)} cached metric names: {e}"
            )
            return [_metric_type_record(name) for name in self._cache.names()]

        self._cache.update(families.values())
        self.debug(
            lambda: f"Discovered {len(families)} metric families from {self._endpoint}"
        )
        return [_metric_type_record(name) for name in families]
