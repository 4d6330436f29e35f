# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from pydantic import BaseModel, ConfigDict


class PromCollectBaseModel(BaseModel):
    """Base model for all promcollect data models."""

    model_config = ConfigDict(arbitrary_types_allowed=True, populate_by_name=True)
