"""Process-exit primitives used as termination strategies.

Both functions accept any integer; the conventional range is 0-255 and
anything else is handed to the host unchanged.
"""

from __future__ import annotations

import os
import sys
from typing import NoReturn

from ctrl.infra import logsink


def exit_process(code: int) -> NoReturn:
    """End the process through the interpreter's normal shutdown.

    Raises :class:`SystemExit`, so ``finally`` blocks and ``atexit``
    handlers still run.  Called from a worker thread this only ends the
    thread; use :func:`hard_exit` there.
    """
    logsink.flush()
    sys.exit(code)


def hard_exit(code: int) -> NoReturn:
    """End the process immediately, skipping interpreter cleanup.

    Standard streams and the log sink are flushed first so buffered
    output is not lost.
    """
    logsink.flush()
    for stream in (sys.stdout, sys.stderr):
        if stream is not None:
            stream.flush()
    os._exit(code)
