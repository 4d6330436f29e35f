# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Environment-driven defaults for promcollect.

Every setting can be overridden with an environment variable named
``PROMCOLLECT_<GROUP>_<FIELD>``, for example::

    PROMCOLLECT_HTTP_TIMEOUT=30 promcollect collect --metric up

Settings are grouped by concern and accessed as ``Environment.<GROUP>.<FIELD>``.
These are defaults only; per-deployment values live in ``CollectorConfig``.
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = ["Environment"]


class _CollectorSettings(BaseSettings):
    """Collector defaults: where the config file lives, the fallback endpoint, and the
    collection cadence."""

    model_config = SettingsConfigDict(
        env_prefix="PROMCOLLECT_COLLECTOR_",
        case_sensitive=False,
    )

    CONFIG_FILE: Path = Field(
        default=Path("/etc/snap-configs/snap-plugin-collector-prometheus-config"),
        description="JSON config file holding the default endpoint and collector options",
    )
    DEFAULT_ENDPOINT: str = Field(
        default="http://localhost:8080/metrics",
        description="Endpoint used when neither the request nor the config file provides one",
    )
    COLLECTION_INTERVAL: float = Field(
        default=10.0,
        gt=0.0,
        le=3600.0,
        description="Seconds between scheduled collection passes",
    )
    CACHE_FILE: Path | None = Field(
        default=None,
        description="Optional JSON file where discovered family names are persisted",
    )


class _HTTPSettings(BaseSettings):
    """HTTP client settings for the snapshot fetcher."""

    model_config = SettingsConfigDict(
        env_prefix="PROMCOLLECT_HTTP_",
        case_sensitive=False,
    )

    TIMEOUT: float = Field(
        default=10.0,
        gt=0.0,
        le=300.0,
        description="Total timeout in seconds for a single snapshot fetch",
    )
    CONNECT_TIMEOUT: float = Field(
        default=5.0,
        gt=0.0,
        le=300.0,
        description="Timeout in seconds for establishing a connection to the endpoint",
    )


class _LoggingSettings(BaseSettings):
    """Console logging settings."""

    model_config = SettingsConfigDict(
        env_prefix="PROMCOLLECT_LOGGING_",
        case_sensitive=False,
    )

    LEVEL: str = Field(
        default="INFO",
        description="Default log level when --log-level is not given",
    )
    MAX_CONSOLE_MESSAGE_LENGTH: int = Field(
        default=10_000,
        ge=100,
        description="Messages longer than this are truncated on the console",
    )


class _Environment(BaseSettings):
    """Root settings object. Use the module-level ``Environment`` instance."""

    model_config = SettingsConfigDict(
        env_prefix="PROMCOLLECT_",
        case_sensitive=False,
    )

    COLLECTOR: _CollectorSettings = Field(default_factory=_CollectorSettings)
    HTTP: _HTTPSettings = Field(default_factory=_HTTPSettings)
    LOGGING: _LoggingSettings = Field(default_factory=_LoggingSettings)


Environment = _Environment()
