# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from typing import Literal

from pydantic import Field
from typing_extensions import Self

from promcollect.common.models.base_models import PromCollectBaseModel


class ConfigRule(PromCollectBaseModel):
    """A single configuration key the host may supply for a namespace."""

    namespace: tuple[str, ...] = Field(description="Namespace the rule applies to")
    key: str = Field(description="Configuration key")
    type: Literal["string"] = Field(default="string", description="Value type")
    required: bool = Field(default=False, description="Whether the host must set it")
    default: str | None = Field(default=None, description="Value used when unset")


class ConfigPolicy(PromCollectBaseModel):
    """The configuration keys this collector accepts."""

    rules: list[ConfigRule] = Field(default_factory=list)

    def add_string_rule(
        self,
        namespace: tuple[str, ...],
        key: str,
        required: bool = False,
        default: str | None = None,
    ) -> Self:
        self.rules.append(
            ConfigRule(namespace=namespace, key=key, required=required, default=default)
        )
        return self

    def get_rule(self, key: str) -> ConfigRule | None:
        return next((rule for rule in self.rules if rule.key == key), None)
