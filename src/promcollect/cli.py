# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Main CLI entry point for promcollect."""

################################################################################
# NOTE: Keep the imports here to a minimum. This file is read every time
# the CLI is run, including to generate the help text.
################################################################################

from pathlib import Path
from typing import Annotated

from cyclopts import App, Parameter

from promcollect.cli_utils import exit_on_error
from promcollect.common.enums import LogLevel

app = App(name="promcollect", help="Prometheus exposition-format metrics collector")

LogLevelParam = Annotated[
    LogLevel | None,
    Parameter(name="--log-level", help="Logging verbosity (default: INFO)"),
]
EndpointParam = Annotated[
    str | None,
    Parameter(
        name=("--endpoint", "-e"),
        help="Prometheus endpoint. /metrics is appended when missing.",
    ),
]
ConfigFileParam = Annotated[
    Path | None,
    Parameter(name="--config-file", help="JSON collector config file"),
]


@app.command(name="list-metrics")
def list_metrics(
    *,
    endpoint: EndpointParam = None,
    config_file: ConfigFileParam = None,
    log_level: LogLevelParam = None,
) -> None:
    """List the metrics that can be collected, one namespace per line."""
    with exit_on_error(title="Error Listing Metrics"):
        from promcollect.cli_runner import run_list_metrics
        from promcollect.common.logging import setup_rich_logging

        setup_rich_logging(log_level)
        run_list_metrics(endpoint=endpoint, config_file=config_file)


@app.command(name="collect")
def collect(
    *,
    metric: Annotated[
        list[str],
        Parameter(
            name=("--metric", "-m"),
            help="Metric family name or full namespace to collect. Repeatable.",
        ),
    ],
    endpoint: EndpointParam = None,
    interval: Annotated[
        float | None,
        Parameter(name=("--interval", "-i"), help="Seconds between collection passes"),
    ] = None,
    once: Annotated[
        bool, Parameter(name="--once", help="Run a single pass and exit")
    ] = False,
    config_file: ConfigFileParam = None,
    output: Annotated[
        Path | None,
        Parameter(
            name=("--output", "-o"),
            help="Append JSONL records to this file instead of stdout",
        ),
    ] = None,
    log_level: LogLevelParam = None,
) -> None:
    """Collect the given metrics on a schedule and write them as JSON lines."""
    with exit_on_error(title="Error Collecting Metrics"):
        from promcollect.cli_runner import run_collect
        from promcollect.common.logging import setup_rich_logging

        setup_rich_logging(log_level)
        run_collect(
            metrics=metric,
            endpoint=endpoint,
            interval=interval,
            once=once,
            config_file=config_file,
            output=output,
        )


@app.command(name="config-policy")
def config_policy(
    *,
    endpoint: EndpointParam = None,
    config_file: ConfigFileParam = None,
    log_level: LogLevelParam = None,
) -> None:
    """Print the configuration policy as JSON."""
    with exit_on_error(title="Error Building Config Policy"):
        from promcollect.cli_runner import run_config_policy
        from promcollect.common.logging import setup_rich_logging

        setup_rich_logging(log_level)
        run_config_policy(endpoint=endpoint, config_file=config_file)
