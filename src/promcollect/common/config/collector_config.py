# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from pathlib import Path
from typing import Annotated

import orjson
from pydantic import Field, ValidationError, field_validator

from promcollect.common.collector_logger import CollectorLogger
from promcollect.common.enums import DiscoveryMode
from promcollect.common.environment import Environment
from promcollect.common.exceptions import ConfigurationError
from promcollect.common.metric_utils import normalize_metrics_endpoint_url
from promcollect.common.models.base_models import PromCollectBaseModel

_logger = CollectorLogger(__name__)


class CollectorConfig(PromCollectBaseModel):
    """Per-deployment configuration threaded into ``PrometheusCollector``."""

    endpoint: Annotated[
        str,
        Field(
            description="Default Prometheus endpoint. Used for dynamic discovery and whenever "
            "a collection request does not carry its own endpoint.",
            validate_default=True,
        ),
    ] = Environment.COLLECTOR.DEFAULT_ENDPOINT

    multi_group_metrics: Annotated[
        frozenset[str],
        Field(
            description="Family names whose samples are summed into TOTAL records each pass",
        ),
    ] = frozenset()

    discovery_mode: Annotated[
        DiscoveryMode,
        Field(
            description="`dynamic` lists the families found on the endpoint, "
            "`static` lists `static_metrics`",
        ),
    ] = DiscoveryMode.DYNAMIC

    static_metrics: Annotated[
        list[str],
        Field(description="Family names returned by static discovery"),
    ] = []

    cache_file: Annotated[
        Path | None,
        Field(description="Where the discovery cache is persisted, if anywhere"),
    ] = Environment.COLLECTOR.CACHE_FILE

    @field_validator("endpoint")
    @classmethod
    def _normalize_endpoint(cls, endpoint: str) -> str:
        return normalize_metrics_endpoint_url(endpoint)


def load_collector_config(path: Path | str | None = None) -> CollectorConfig:
    """Load a ``CollectorConfig`` from a JSON file.

    A missing or unreadable file is not an error: a warning is logged and the
    defaults are used. A file that parses but holds invalid values raises
    ``ConfigurationError``.

    Example file::

        {"endpoint": "http://my-service:9090", "multi_group_metrics": ["http_requests_total"]}
    """
    path = Path(path) if path is not None else Environment.COLLECTOR.CONFIG_FILE

    try:
        raw = orjson.loads(path.read_bytes())
    except (OSError, orjson.JSONDecodeError) as e:
        _logger.warning(
            f"Cannot load config file from {path}, reason: {e!r}. "
            f"Endpoint is set to {Environment.COLLECTOR.DEFAULT_ENDPOINT}"
        )
        return CollectorConfig()

    if not isinstance(raw, dict):
        raise ConfigurationError(
            f"Config file {path} must contain a JSON object, got {type(raw).__name__}"
        )

    try:
        config = CollectorConfig.model_validate(
            {k: v for k, v in raw.items() if k in CollectorConfig.model_fields}
        )
    except ValidationError as e:
        raise ConfigurationError(f"Invalid config file {path}: {e}") from e

    _logger.debug(lambda: f"Loaded collector config from {path}: {config!r}")
    return config
