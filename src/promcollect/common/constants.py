# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

VENDOR = "hyperpilot"
PLUGIN_NAME = "prometheus"
PLUGIN_VERSION = 1
NAMESPACE_PREFIX: tuple[str, ...] = (VENDOR, PLUGIN_NAME)

METRICS_PATH_SUFFIX = "/metrics"

# Exposition-format naming conventions
COUNTER_TOTAL_SUFFIX = "_total"
SUM_SUFFIX = "_sum"
COUNT_SUFFIX = "_count"
QUANTILE_LABEL = "quantile"

# Tags written on decoded and aggregated records
SUMMARY_TAG = "summary"
TOTAL_TAG = "total"
TOTAL_TAG_VALUE = "TOTAL"
BYTES_UNIT = "B"

ENDPOINT_CONFIG_KEY = "endpoint"
