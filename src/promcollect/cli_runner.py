# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Implementations of the CLI commands, kept out of ``cli.py`` so help stays fast."""

import asyncio
import contextlib
from pathlib import Path

import orjson
from rich.console import Console

from promcollect.common.collector_logger import CollectorLogger
from promcollect.common.config import CollectorConfig, load_collector_config
from promcollect.common.constants import ENDPOINT_CONFIG_KEY
from promcollect.common.models import MetricRecord, Namespace
from promcollect.prometheus import (
    CollectionScheduler,
    JsonlRecordSink,
    PrometheusCollector,
)

_logger = CollectorLogger(__name__)


def build_collector_config(
    endpoint: str | None = None, config_file: Path | None = None
) -> CollectorConfig:
    """Load the collector config file and apply command line overrides."""
    config = load_collector_config(config_file)
    if endpoint is not None:
        config = CollectorConfig.model_validate(
            {**config.model_dump(), "endpoint": endpoint}
        )
    return config


def build_requested_metrics(
    metrics: list[str], config: CollectorConfig
) -> list[MetricRecord]:
    """Turn CLI metric arguments into requested records.

    A bare family name is placed under the plugin namespace; anything with a
    ``/`` is taken as a full namespace.
    """
    return [
        MetricRecord(
            namespace=Namespace.parse(metric)
            if "/" in metric
            else Namespace.for_family(metric),
            config={ENDPOINT_CONFIG_KEY: config.endpoint},
        )
        for metric in metrics
    ]


def run_list_metrics(
    endpoint: str | None = None,
    config_file: Path | None = None,
    console: Console | None = None,
) -> None:
    config = build_collector_config(endpoint, config_file)
    metric_types = asyncio.run(_list_metrics(config))
    console = console or Console()
    for metric_type in metric_types:
        console.print(
            str(metric_type.namespace), highlight=False, markup=False, soft_wrap=True
        )


async def _list_metrics(config: CollectorConfig) -> list[MetricRecord]:
    async with PrometheusCollector(config) as collector:
        return await collector.get_metric_types()


def run_collect(
    metrics: list[str],
    endpoint: str | None = None,
    interval: float | None = None,
    once: bool = False,
    config_file: Path | None = None,
    output: Path | None = None,
) -> None:
    config = build_collector_config(endpoint, config_file)
    requested = build_requested_metrics(metrics, config)
    sink = JsonlRecordSink(output)

    with contextlib.suppress(KeyboardInterrupt):
        asyncio.run(_collect(config, requested, sink, interval, once))

    _logger.info(lambda: f"Wrote {sink.records_written} records")


async def _collect(
    config: CollectorConfig,
    requested: list[MetricRecord],
    sink: JsonlRecordSink,
    interval: float | None,
    once: bool,
) -> None:
    async with PrometheusCollector(config) as collector:
        if once:
            await sink.write(await collector.collect_metrics(requested))
            return

        scheduler = CollectionScheduler(
            collector,
            requested,
            interval=interval,
            record_callback=sink,
        )
        await scheduler.start()
        try:
            await scheduler.wait()
        finally:
            await scheduler.stop()


def run_config_policy(
    endpoint: str | None = None,
    config_file: Path | None = None,
    console: Console | None = None,
) -> None:
    config = build_collector_config(endpoint, config_file)
    policy = PrometheusCollector(config).get_config_policy()
    console = console or Console()
    console.print(
        orjson.dumps(policy.model_dump(mode="json"), option=orjson.OPT_INDENT_2).decode(),
        highlight=False,
        markup=False,
        soft_wrap=True,
    )
