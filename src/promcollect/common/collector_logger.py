# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Logger wrapper with extra levels and lazily evaluated messages.

Messages may be passed as a callable (usually a lambda) so that expensive
f-strings are only formatted when the level is actually enabled::

    _logger.debug(lambda: f"Decoded {len(records)} records for {family.name}")
"""

import logging
from collections.abc import Callable

_TRACE = logging.DEBUG - 5
_DEBUG = logging.DEBUG
_INFO = logging.INFO
_NOTICE = logging.INFO + 5
_WARNING = logging.WARNING
_SUCCESS = logging.WARNING + 5
_ERROR = logging.ERROR
_CRITICAL = logging.CRITICAL

logging.addLevelName(_TRACE, "TRACE")
logging.addLevelName(_NOTICE, "NOTICE")
logging.addLevelName(_SUCCESS, "SUCCESS")


class CollectorLogger:
    """Thin wrapper around :class:`logging.Logger` used throughout promcollect.

    Adds TRACE, NOTICE and SUCCESS levels and accepts either a string or a
    zero-argument callable returning a string as the message.
    """

    def __init__(self, logger_name: str | None = None) -> None:
        self._logger = logging.getLogger(logger_name)

    @property
    def name(self) -> str:
        return self._logger.name

    @property
    def is_trace_enabled(self) -> bool:
        return self._logger.isEnabledFor(_TRACE)

    @property
    def is_debug_enabled(self) -> bool:
        return self._logger.isEnabledFor(_DEBUG)

    def log(
        self, level: int, message: str | Callable[..., str], *args, **kwargs
    ) -> None:
        if not self._logger.isEnabledFor(level):
            return
        if callable(message):
            message = message()
        # stacklevel=3 attributes the record to the caller of trace()/debug()/...
        kwargs.setdefault("stacklevel", 3)
        self._logger.log(level, message, *args, **kwargs)

    def trace_or_debug(
        self,
        trace_msg: str | Callable[..., str],
        debug_msg: str | Callable[..., str],
    ) -> None:
        """Log the trace message when TRACE is enabled, otherwise the debug message."""
        if self.is_trace_enabled:
            self.log(_TRACE, trace_msg)
        else:
            self.log(_DEBUG, debug_msg)

    def trace(self, message: str | Callable[..., str], *args, **kwargs) -> None:
        self.log(_TRACE, message, *args, **kwargs)

    def debug(self, message: str | Callable[..., str], *args, **kwargs) -> None:
        self.log(_DEBUG, message, *args, **kwargs)

    def info(self, message: str | Callable[..., str], *args, **kwargs) -> None:
        self.log(_INFO, message, *args, **kwargs)

    def notice(self, message: str | Callable[..., str], *args, **kwargs) -> None:
        self.log(_NOTICE, message, *args, **kwargs)

    def warning(self, message: str | Callable[..., str], *args, **kwargs) -> None:
        self.log(_WARNING, message, *args, **kwargs)

    def success(self, message: str | Callable[..., str], *args, **kwargs) -> None:
        self.log(_SUCCESS, message, *args, **kwargs)

    def error(self, message: str | Callable[..., str], *args, **kwargs) -> None:
        self.log(_ERROR, message, *args, **kwargs)

    def exception(self, message: str | Callable[..., str], *args, **kwargs) -> None:
        kwargs.setdefault("exc_info", True)
        self.log(_ERROR, message, *args, **kwargs)

    def critical(self, message: str | Callable[..., str], *args, **kwargs) -> None:
        self.log(_CRITICAL, message, *args, **kwargs)
