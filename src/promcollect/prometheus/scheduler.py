# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
import asyncio
import time
from collections.abc import Sequence

from promcollect.common.environment import Environment
from promcollect.common.mixins import CollectorLoggerMixin
from promcollect.common.models import ErrorDetails, MetricRecord
from promcollect.prometheus.collector import PrometheusCollector
from promcollect.prometheus.protocols import ErrorCallback, RecordCallback

__all__ = ["CollectionScheduler"]


class CollectionScheduler(CollectorLoggerMixin):
    """Runs collection passes on a fixed interval, one at a time.

    The first pass runs immediately after ``start()``. A failing pass never
    stops the loop: its error goes to ``error_callback`` (or the log) and the
    next tick tries again.

    Args:
        collector: Collector to run passes on
        requested: Metrics to request on every pass
        interval: Seconds between pass starts (default: Environment.COLLECTOR.COLLECTION_INTERVAL)
        record_callback: Optional async callback to receive collected records.
            Signature: async (records: list[MetricRecord], collector_id: str) -> None
        error_callback: Optional async callback to receive collection errors.
            Signature: async (error: ErrorDetails, collector_id: str) -> None
        collector_id: Identifier passed to the callbacks
    """

    def __init__(
        self,
        collector: PrometheusCollector,
        requested: Sequence[MetricRecord],
        interval: float | None = None,
        record_callback: RecordCallback | None = None,
        error_callback: ErrorCallback | None = None,
        collector_id: str = "prometheus_collector",
        **kwargs,
    ) -> None:
        super().__init__(logger_name=collector_id, **kwargs)
        self._collector = collector
        self._requested = requested
        self._interval = (
            interval
            if interval is not None
            else Environment.COLLECTOR.COLLECTION_INTERVAL
        )
        self._record_callback = record_callback
        self._error_callback = error_callback
        self.id = collector_id
        self._stop_event = asyncio.Event()
        self._task: asyncio.Task | None = None

    @property
    def interval(self) -> float:
        return self._interval

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def start(self) -> None:
        """Start the background collection loop."""
        if self.is_running:
            self.warning("Collection loop is already running")
            return
        self._stop_event.clear()
        self._task = asyncio.create_task(
            self._collect_metrics_loop(), name=f"{self.id}_loop"
        )
        self.debug(lambda: f"Started collection loop with interval {self._interval}s")

    async def stop(self) -> None:
        """Stop the loop after the pass in progress, if any, completes."""
        self._stop_event.set()
        if self._task is None:
            return
        try:
            await self._task
        finally:
            self._task = None
        self.debug("Stopped collection loop")

    async def wait(self) -> None:
        """Wait until the loop is stopped."""
        if self._task is not None:
            await self._task

    async def _collect_metrics_loop(self) -> None:
        while not self._stop_event.is_set():
            pass_start = time.perf_counter()
            await self.run_once()
            remaining = self._interval - (time.perf_counter() - pass_start)
            try:
                await asyncio.wait_for(
                    self._stop_event.wait(), timeout=max(remaining, 0.0)
                )
            except asyncio.TimeoutError:
                pass

    async def run_once(self) -> list[MetricRecord]:
        """Run one collection pass and deliver its outcome to the callbacks."""
        try:
            records = await self._collector.collect_metrics(self._requested)
        except Exception as e:
            await self._send_error_via_callback(e)
            return []

        await self._send_records_via_callback(records)
        return records

    async def _send_error_via_callback(self, error: Exception) -> None:
        if self._error_callback:
            try:
                await self._error_callback(ErrorDetails.from_exception(error), self.id)
            except Exception as callback_error:
                self.error(f"Failed to send error via callback: {callback_error!r}")
        else:
            self.error(f"Metrics collection error: {error!r}")

    async def _send_records_via_callback(self, records: list[MetricRecord]) -> None:
        """Send records to the callback if configured and there are any."""
        if records and self._record_callback:
            try:
                await self._record_callback(records, self.id)
            except Exception as e:
                self.error(f"Failed to send records via callback: {e!r}", exc_info=True)
