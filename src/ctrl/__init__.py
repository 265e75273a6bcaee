"""ctrl: a process-control harness for program entry points.

``main`` returns ``None`` to finish normally, or an error to end the
process; :func:`exit`, :func:`exitf` and :func:`fatalf` build errors
that carry an explicit status code::

    import ctrl

    def main() -> BaseException | None:
        if not args:
            return ctrl.exitf(2, "usage: %s <file>", prog)
        ...

    if __name__ == "__main__":
        ctrl.run(main)

Tests call :func:`set_panic` (or use :func:`ctrl.testing.capture_exit`)
so that termination raises :class:`TerminationPanic` instead of ending
the interpreter.
"""

from ctrl.console import console_hook
from ctrl.core import (
    Hook,
    Runner,
    Terminator,
    as_exit_signal,
    default_hook,
    entrypoint,
    exit,
    exitf,
    fatalf,
    run,
    silent_hook,
)
from ctrl.exceptions import CtrlError, ExitSignal, TerminationPanic
from ctrl.registry import reset, set_hook, set_panic, set_terminator
from ctrl.version import __version__

__all__: list[str] = [
    "CtrlError",
    "ExitSignal",
    "Hook",
    "Runner",
    "TerminationPanic",
    "Terminator",
    "__version__",
    "as_exit_signal",
    "console_hook",
    "default_hook",
    "entrypoint",
    "exit",
    "exitf",
    "fatalf",
    "reset",
    "run",
    "set_hook",
    "set_panic",
    "set_terminator",
    "silent_hook",
]
