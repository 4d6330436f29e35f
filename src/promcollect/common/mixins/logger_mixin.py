# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from collections.abc import Callable

from promcollect.common.collector_logger import CollectorLogger


class CollectorLoggerMixin:
    """Mixin that gives a component its own :class:`CollectorLogger`.

    The logger is named after ``logger_name`` when given, otherwise after the
    concrete class name, so log lines read ``(PrometheusCollector:123)``.
    """

    def __init__(self, logger_name: str | None = None, **kwargs) -> None:
        self.logger = CollectorLogger(logger_name or self.__class__.__name__)
        super().__init__(**kwargs)

    @property
    def is_trace_enabled(self) -> bool:
        return self.logger.is_trace_enabled

    @property
    def is_debug_enabled(self) -> bool:
        return self.logger.is_debug_enabled

    def trace(self, message: str | Callable[..., str], *args, **kwargs) -> None:
        kwargs.setdefault("stacklevel", 4)
        self.logger.trace(message, *args, **kwargs)

    def debug(self, message: str | Callable[..., str], *args, **kwargs) -> None:
        kwargs.setdefault("stacklevel", 4)
        self.logger.debug(message, *args, **kwargs)

    def info(self, message: str | Callable[..., str], *args, **kwargs) -> None:
        kwargs.setdefault("stacklevel", 4)
        self.logger.info(message, *args, **kwargs)

    def notice(self, message: str | Callable[..., str], *args, **kwargs) -> None:
        kwargs.setdefault("stacklevel", 4)
        self.logger.notice(message, *args, **kwargs)

    def warning(self, message: str | Callable[..., str], *args, **kwargs) -> None:
        kwargs.setdefault("stacklevel", 4)
        self.logger.warning(message, *args, **kwargs)

    def success(self, message: str | Callable[..., str], *args, **kwargs) -> None:
        kwargs.setdefault("stacklevel", 4)
        self.logger.success(message, *args, **kwargs)

    def error(self, message: str | Callable[..., str], *args, **kwargs) -> None:
        kwargs.setdefault("stacklevel", 4)
        self.logger.error(message, *args, **kwargs)

    def exception(self, message: str | Callable[..., str], *args, **kwargs) -> None:
        kwargs.setdefault("stacklevel", 4)
        self.logger.exception(message, *args, **kwargs)
