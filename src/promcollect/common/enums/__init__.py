# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from promcollect.common.enums.base_enums import CaseInsensitiveStrEnum
from promcollect.common.enums.collector_enums import DiscoveryMode, LogLevel
from promcollect.common.enums.prometheus_enums import (
    PrometheusMetricType,
    SummaryComponent,
)

__all__ = [
    "CaseInsensitiveStrEnum",
    "DiscoveryMode",
    "LogLevel",
    "PrometheusMetricType",
    "SummaryComponent",
]
