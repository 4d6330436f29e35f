# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Rich console logging for promcollect.

Log lines render as::

    12:26:52.092 INFO     Collected 14 records from http://localhost:8080/metrics (PrometheusCollector:143)
    12:26:52.279 WARNING  Unable to collect metrics from http://localhost:8080/metrics: ... (PrometheusCollector:131)

Usage::

    from promcollect.common.logging import setup_rich_logging

    setup_rich_logging("DEBUG")
"""

from __future__ import annotations

import logging
import re
from datetime import datetime

from rich.console import Console, ConsoleRenderable, Group
from rich.highlighter import RegexHighlighter
from rich.logging import RichHandler
from rich.text import Span, Text
from rich.traceback import Traceback

from promcollect.common.collector_logger import CollectorLogger
from promcollect.common.environment import Environment

_logger = CollectorLogger(__name__)


def setup_rich_logging(
    level: str | int | None = None, console: Console | None = None
) -> CustomRichHandler:
    """Install a ``CustomRichHandler`` on the root logger.

    Existing root handlers are removed so repeated calls (e.g. from tests or a
    re-invoked CLI) do not duplicate output. Logs go to stderr by default so
    stdout stays clean for JSONL records.
    """
    if level is None:
        level = Environment.LOGGING.LEVEL
    if isinstance(level, str):
        level = level.upper()

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for existing_handler in root_logger.handlers[:]:
        root_logger.removeHandler(existing_handler)

    rich_handler = CustomRichHandler(
        rich_tracebacks=True,
        show_path=False,
        console=console or Console(stderr=True),
        show_time=False,
        show_level=False,
        tracebacks_show_locals=False,
    )
    rich_handler.setLevel(level)
    root_logger.addHandler(rich_handler)

    _logger.debug(lambda: f"Logging initialized with level: {level}")
    return rich_handler


class LogHighlighter(RegexHighlighter):
    """Lightweight highlighter for log messages.

    Highlights URLs, file paths, numbers, quoted strings, booleans and
    key=value pairs with a single combined regex.
    """

    base_style = "repr."

    _MEGA_PATTERN = re.compile(
        r"(?P<url>(?:https?|file)://[^\s\]\)'\"]+)"  # URLs
        r"|(?P<path>(?<![/\w.~])(?:/[\w._-]+)+/?)"  # Unix paths
        r"|(?P<filename>\b[\w.-]+\.(?:jsonl?|log|txt)\b)"  # Filenames
        r"|(?P<number>(?<![.\w])-?\d+\.?\d*(?:(?:e[+-]?\d+)|(?:ns|ms|s))?\b)"  # Numbers
        r"|(?P<str>\"[^\"]*\"|'[^']*'|`[^`]*`)"  # Quoted strings
        r"|\b(?P<bool_true>True)\b|\b(?P<bool_false>False)\b|\b(?P<none>None)\b"
        r"|(?P<brace>[\[\](){}])"
        r"|\b(?P<attrib_name>\w+)=(?P<attrib_value>[^\s,=\[\](){}]+)?"  # key=value
    )  # fmt: skip

    highlights = [_MEGA_PATTERN]

    def highlight(self, text: Text) -> None:
        plain = text.plain
        append_span = text._spans.append
        prefix = self.base_style

        for match in self._MEGA_PATTERN.finditer(plain):
            for name, value in match.groupdict().items():
                if value is not None:
                    start, end = match.span(name)
                    if start != -1:
                        append_span(Span(start, end, f"{prefix}{name}"))


class CustomRichHandler(RichHandler):
    """Rich logging handler with a compact line format.

    Each record renders as ``HH:MM:SS.mmm LEVEL    message (logger_name:lineno)``.
    Messages longer than ``Environment.LOGGING.MAX_CONSOLE_MESSAGE_LENGTH`` are
    truncated.
    """

    LOG_LEVEL_STYLES = {
        "TRACE": "dim",
        "DEBUG": "dim",
        "INFO": "cyan",
        "NOTICE": "blue",
        "WARNING": "yellow",
        "SUCCESS": "green",
        "ERROR": "red",
        "CRITICAL": "bold red",
    }

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.highlighter = LogHighlighter()

    def render(
        self,
        *,
        record: logging.LogRecord,
        traceback: Traceback | None,
        message_renderable: ConsoleRenderable,
    ) -> ConsoleRenderable:
        timestamp = datetime.fromtimestamp(record.created).strftime("%H:%M:%S.%f")[:-3]
        level_style = self.LOG_LEVEL_STYLES.get(record.levelname, "white")
        message = Text(
            record.getMessage()[: Environment.LOGGING.MAX_CONSOLE_MESSAGE_LENGTH]
        )
        self.highlighter.highlight(message)

        log_line = Text.assemble(
            (f"{timestamp} ", "log.time"),
            (f"{record.levelname:<8} ", level_style),
            message,
            (f" ({record.name}:{record.lineno})", "dim italic"),
        )
        return Group(log_line, traceback) if traceback else log_line
