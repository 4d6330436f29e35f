# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from promcollect.common.models.base_models import PromCollectBaseModel
from promcollect.common.models.config_models import ConfigPolicy, ConfigRule
from promcollect.common.models.error_models import ErrorDetails
from promcollect.common.models.exposition_models import (
    MetricFamily,
    MetricSample,
    SummaryData,
)
from promcollect.common.models.record_models import (
    DecodedValue,
    MetricRecord,
    Namespace,
)

__all__ = [
    "ConfigPolicy",
    "ConfigRule",
    "DecodedValue",
    "ErrorDetails",
    "MetricFamily",
    "MetricRecord",
    "MetricSample",
    "Namespace",
    "PromCollectBaseModel",
    "SummaryData",
]
