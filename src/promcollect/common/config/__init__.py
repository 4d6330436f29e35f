# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from promcollect.common.config.collector_config import (
    CollectorConfig,
    load_collector_config,
)

__all__ = ["CollectorConfig", "load_collector_config"]
