"""Stock hook implementations."""

from __future__ import annotations

from ctrl.exceptions import ExitMessage
from ctrl.infra import logsink


def default_hook(code: int, err: BaseException | None) -> None:
    """Log *err* when there is one; otherwise do nothing.

    Messages built by :func:`~ctrl.core.signals.exitf` were logged at
    construction time and are not repeated.
    """
    if err is None or isinstance(err, ExitMessage):
        return
    logsink.log_line(str(err))


def silent_hook(code: int, err: BaseException | None) -> None:
    """Report nothing."""
