# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from pydantic import Field

from promcollect.common.models.base_models import PromCollectBaseModel


class ErrorDetails(PromCollectBaseModel):
    """Serializable description of an error raised during collection."""

    code: int | None = Field(
        default=None,
        description="HTTP status code of the failed fetch, if the error came from the endpoint",
    )
    type: str | None = Field(
        default=None, description="Name of the exception class that was raised"
    )
    message: str = Field(description="Human-readable error message")

    def __str__(self) -> str:
        if self.type:
            return f"{self.type}: {self.message}"
        return self.message

    @classmethod
    def from_exception(cls, e: BaseException) -> "ErrorDetails":
        """Build error details from an exception, keeping the HTTP status when present."""
        return cls(
            code=getattr(e, "status", None),
            type=e.__class__.__name__,
            message=str(e),
        )
