# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Records exchanged with the host: requested metrics in, decoded metrics out."""

from __future__ import annotations

from typing import Any, NamedTuple

from pydantic import ConfigDict, Field, field_serializer, field_validator

from promcollect.common.constants import (
    NAMESPACE_PREFIX,
    PLUGIN_VERSION,
    TOTAL_TAG,
    TOTAL_TAG_VALUE,
)
from promcollect.common.models.base_models import PromCollectBaseModel


class Namespace(PromCollectBaseModel):
    """Hierarchical metric identifier, e.g. ``hyperpilot/prometheus/up``."""

    model_config = ConfigDict(frozen=True)

    segments: tuple[str, ...] = Field(description="Ordered path segments")

    @classmethod
    def of(cls, *segments: str) -> Namespace:
        return cls(segments=segments)

    @classmethod
    def for_family(cls, family_name: str) -> Namespace:
        """Namespace under the vendor/plugin prefix for a metric family."""
        return cls(segments=(*NAMESPACE_PREFIX, family_name))

    @classmethod
    def parse(cls, path: str) -> Namespace:
        """Parse a ``/``-separated path. Empty segments are ignored."""
        segments = tuple(s for s in path.split("/") if s)
        if not segments:
            raise ValueError(f"Namespace path has no segments: {path!r}")
        return cls(segments=segments)

    @property
    def last(self) -> str:
        """The final segment, which names the metric family."""
        return self.segments[-1]

    def __str__(self) -> str:
        return "/".join(self.segments)


class MetricRecord(PromCollectBaseModel):
    """A metric as the host sees it.

    The host requests metrics by passing records that only carry a namespace
    (and optionally the endpoint-scoped config). Collection returns records
    with every field populated.
    """

    namespace: Namespace = Field(description="Hierarchical metric identifier")
    timestamp_ns: int | None = Field(
        default=None,
        description="Wall-clock time in nanoseconds when the collection pass started",
    )
    description: str = Field(default="", description="HELP text of the source family")
    unit: str | None = Field(default=None, description="Unit hint, e.g. 'B'")
    data: float | None = Field(default=None, description="Metric value")
    tags: dict[str, str] = Field(
        default_factory=dict, description="Sample labels plus synthetic tags"
    )
    version: int = Field(default=PLUGIN_VERSION, description="Record schema version")
    config: dict[str, Any] | None = Field(
        default=None,
        exclude=True,
        description="Endpoint-scoped configuration supplied by the host with the request",
    )

    @field_validator("namespace", mode="before")
    @classmethod
    def _parse_namespace(cls, value: Any) -> Any:
        if isinstance(value, str):
            return Namespace.parse(value)
        if isinstance(value, list | tuple):
            return Namespace(segments=tuple(value))
        return value

    @field_serializer("namespace")
    def _serialize_namespace(self, namespace: Namespace) -> str:
        return str(namespace)

    @property
    def is_total(self) -> bool:
        """True if this is an aggregated total record."""
        return self.tags.get(TOTAL_TAG) == TOTAL_TAG_VALUE


class DecodedValue(NamedTuple):
    """One value produced by decoding a single sample."""

    value: float
    tags: dict[str, str]
    unit: str | None = None
