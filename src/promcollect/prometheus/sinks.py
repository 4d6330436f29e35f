# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
import sys
from pathlib import Path
from typing import BinaryIO

import aiofiles
import orjson

from promcollect.common.mixins import CollectorLoggerMixin
from promcollect.common.models import MetricRecord

__all__ = ["JsonlRecordSink", "serialize_record"]


def serialize_record(record: MetricRecord) -> bytes:
    """One JSONL line for ``record``. NaN and infinite values serialize as null."""
    return orjson.dumps(
        record.model_dump(mode="json"), option=orjson.OPT_APPEND_NEWLINE
    )


class JsonlRecordSink(CollectorLoggerMixin):
    """Writes collected records as JSON lines, to a file or to stdout.

    Instances are usable directly as a scheduler ``record_callback``.

    Args:
        path: File to append to. Records go to stdout when None.
    """

    def __init__(
        self, path: Path | str | None = None, stream: BinaryIO | None = None, **kwargs
    ) -> None:
        super().__init__(**kwargs)
        self._path = Path(path) if path is not None else None
        self._stream = stream
        self.records_written = 0

    @property
    def path(self) -> Path | None:
        return self._path

    async def __call__(self, records: list[MetricRecord], collector_id: str) -> None:
        await self.write(records)

    async def write(self, records: list[MetricRecord]) -> None:
        if not records:
            return
        content = b"".join(serialize_record(record) for record in records)

        if self._path is None:
            stream = self._stream or sys.stdout.buffer
            stream.write(content)
            stream.flush()
        else:
            try:
                self._path.parent.mkdir(parents=True, exist_ok=True)
                async with aiofiles.open(self._path, "ab") as f:
                    await f.write(content)
            except Exception as e:
                self.error(lambda: f"Failed to write records to {self._path}: {e}")
                raise

        self.records_written += len(records)
        self.trace(lambda: f"Wrote {len(records)} records")
