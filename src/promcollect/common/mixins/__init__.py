# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from promcollect.common.mixins.logger_mixin import CollectorLoggerMixin

__all__ = ["CollectorLoggerMixin"]
