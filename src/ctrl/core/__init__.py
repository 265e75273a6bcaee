"""Core layer: signals, hooks and the runner.

Rules
-----
* No direct process termination; that goes through a ``Terminator``.
* All output goes through :mod:`ctrl.infra.logsink`.
"""

from ctrl.core.hooks import default_hook, silent_hook
from ctrl.core.protocols import Hook, Terminator
from ctrl.core.runner import Runner, entrypoint, run
from ctrl.core.signals import as_exit_signal, classify, exit, exitf, fatalf

__all__: list[str] = [
    "Hook",
    "Runner",
    "Terminator",
    "as_exit_signal",
    "classify",
    "default_hook",
    "entrypoint",
    "exit",
    "exitf",
    "fatalf",
    "run",
    "silent_hook",
]
