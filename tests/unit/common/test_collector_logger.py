# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
import logging
from unittest.mock import MagicMock

import pytest

from promcollect.common.collector_logger import CollectorLogger
from promcollect.common.mixins import CollectorLoggerMixin


@pytest.fixture
def logger() -> CollectorLogger:
    return CollectorLogger("promcollect.test")


class TestCollectorLogger:
    @pytest.mark.parametrize(
        "level_name,level",
        [("TRACE", 5), ("NOTICE", 25), ("SUCCESS", 35)],
    )  # fmt: skip
    def test_custom_levels_are_registered(self, level_name: str, level: int):
        assert logging.getLevelName(level) == level_name

    def test_lazy_message_not_evaluated_when_disabled(self, logger, caplog):
        caplog.set_level(logging.INFO, logger="promcollect.test")
        message = MagicMock(return_value="expensive")

        logger.debug(message)

        message.assert_not_called()
        assert caplog.records == []

    def test_lazy_message_evaluated_when_enabled(self, logger, caplog):
        caplog.set_level(logging.DEBUG, logger="promcollect.test")

        logger.debug(lambda: "computed message")

        assert caplog.records[0].getMessage() == "computed message"

    @pytest.mark.parametrize(
        "method,level",
        [
            ("trace", 5),
            ("debug", logging.DEBUG),
            ("info", logging.INFO),
            ("notice", 25),
            ("warning", logging.WARNING),
            ("success", 35),
            ("error", logging.ERROR),
            ("critical", logging.CRITICAL),
        ],
    )  # fmt: skip
    def test_level_methods(self, logger, caplog, method: str, level: int):
        caplog.set_level(5, logger="promcollect.test")

        getattr(logger, method)("hello")

        assert caplog.records[0].levelno == level

    def test_record_attributed_to_caller(self, logger, caplog):
        caplog.set_level(logging.INFO, logger="promcollect.test")

        logger.info("where am I")

        assert caplog.records[0].funcName == "test_record_attributed_to_caller"

    def test_exception_includes_exc_info(self, logger, caplog):
        caplog.set_level(logging.ERROR, logger="promcollect.test")

        try:
            raise RuntimeError("boom")
        except RuntimeError:
            logger.exception("failed")

        assert caplog.records[0].exc_info is not None

    def test_trace_or_debug(self, logger, caplog):
        caplog.set_level(logging.DEBUG, logger="promcollect.test")
        logger.trace_or_debug("trace detail", "debug summary")

        caplog.set_level(5, logger="promcollect.test")
        logger.trace_or_debug("trace detail", "debug summary")

        assert [r.getMessage() for r in caplog.records] == [
            "debug summary",
            "trace detail",
        ]

    def test_enabled_properties(self, logger, caplog):
        caplog.set_level(logging.DEBUG, logger="promcollect.test")

        assert logger.is_debug_enabled
        assert not logger.is_trace_enabled


class TestCollectorLoggerMixin:
    class Component(CollectorLoggerMixin):
        def do_work(self) -> None:
            self.info("working")

    def test_logger_named_after_class(self):
        assert self.Component().logger.name == "Component"

    def test_explicit_logger_name(self):
        assert self.Component(logger_name="custom").logger.name == "custom"

    def test_record_attributed_to_component_method(self, caplog):
        caplog.set_level(logging.INFO, logger="Component")

        self.Component().do_work()

        assert caplog.records[0].funcName == "do_work"
        assert caplog.records[0].name == "Component"
