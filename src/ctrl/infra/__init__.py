"""Infrastructure layer: the log sink and the process-exit primitives.

Rules
-----
* No imports from ``core`` or ``registry``.
* Everything here talks to the interpreter or the OS directly.
"""

from ctrl.infra.logsink import flush, get_logger, log_line, set_output
from ctrl.infra.termination import exit_process, hard_exit

__all__: list[str] = [
    "exit_process",
    "flush",
    "get_logger",
    "hard_exit",
    "log_line",
    "set_output",
]
