# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from promcollect.common.enums.base_enums import CaseInsensitiveStrEnum


class DiscoveryMode(CaseInsensitiveStrEnum):
    """How the collector answers "which metrics exist" before a collection endpoint is known."""

    STATIC = "static"
    """Return a fixed, pre-declared list of metric names."""

    DYNAMIC = "dynamic"
    """Fetch and parse the default endpoint once and return every family found."""


class LogLevel(CaseInsensitiveStrEnum):
    """Log levels accepted by the CLI and the logging environment settings."""

    TRACE = "TRACE"
    DEBUG = "DEBUG"
    INFO = "INFO"
    NOTICE = "NOTICE"
    WARNING = "WARNING"
    SUCCESS = "SUCCESS"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"
