"""Rich-rendered hook for interactive programs.

:func:`console_hook` is an alternative to the default hook that prints
a styled error summary instead of a timestamped log line::

    ctrl.set_hook(ctrl.console_hook)

This module avoids module-level imports of rich so that installing the
hook never fails; when rich is missing it falls back to plain stderr.
"""

from __future__ import annotations

import sys
from typing import Any

from ctrl.exceptions import DependencyError


def get_rich_console() -> Any:
    """Build a stderr-bound ``rich.console.Console``.

    Raises
    ------
    DependencyError
        When rich cannot be imported.
    """
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise DependencyError(
            "rich is not installed; console_hook needs `pip install rich`",
        ) from exc
    return Console(stderr=True)


class _StderrReporter:
    """Writes one report line, styled when rich is importable."""

    def report(self, markup: str, plain: str) -> None:
        try:
            rich_console = get_rich_console()
        except DependencyError:
            print(plain, file=sys.stderr)
            return
        rich_console.print(markup)


reporter = _StderrReporter()


def _escape(text: str) -> str:
    """Neutralise rich markup in user text; identity without rich."""
    try:
        from rich.markup import escape
    except ModuleNotFoundError:
        return text
    return escape(text)


def console_hook(code: int, err: BaseException | None) -> None:
    """Print an ``Error:`` line for *err*, or the bare status when non-zero.

    Silent for a clean ``exit(0)``.
    """
    if err is not None:
        message = str(err)
        reporter.report(
            f"[bold red]Error:[/bold red] {_escape(message)}",
            f"Error: {message}",
        )
        return
    if code != 0:
        reporter.report(
            f"[yellow]exit status {code}[/yellow]",
            f"exit status {code}",
        )
