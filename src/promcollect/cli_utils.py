# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
import sys
from collections.abc import Iterator
from contextlib import contextmanager

from rich.console import Console
from rich.panel import Panel
from rich.text import Text


@contextmanager
def exit_on_error(
    *exceptions: type[BaseException],
    title: str = "Error",
    exit_code: int = 1,
) -> Iterator[None]:
    """Render any matching exception as a rich error panel on stderr and exit.

    Args:
        *exceptions: Exception types to handle (default: Exception)
        title: Title of the error panel
        exit_code: Process exit code on error
    """
    try:
        yield
    except exceptions or (Exception,) as e:
        console = Console(stderr=True)
        console.print(
            Panel(
                Text(str(e) or repr(e), style="red"),
                title=f"{title}: {type(e).__name__}",
                title_align="left",
                border_style="red",
            )
        )
        sys.exit(exit_code)
