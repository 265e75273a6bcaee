"""Protocols (interfaces) for the two swappable seams of the runner.

Any callable with a matching signature satisfies these structurally; no
inheritance is required.
"""

from __future__ import annotations

from typing import Protocol


class Hook(Protocol):
    """Observer invoked exactly once per termination decision.

    Terminating the process is *not* the hook's job; it only reports.
    """

    def __call__(self, code: int, err: BaseException | None) -> None:
        """Report that the process is about to end with *code*.

        Parameters
        ----------
        code:
            The resolved exit status.
        err:
            The error behind the decision: the cause of a bare
            :class:`~ctrl.exceptions.ExitSignal` (possibly ``None``), or
            the original error returned by ``main``.
        """
        ...  # pragma: no cover


class Terminator(Protocol):
    """Strategy that ends the process with a status code.

    Production implementations never return.  Test substitutes may
    record the code and return, in which case the runner returns too.
    """

    def __call__(self, code: int) -> None:
        ...  # pragma: no cover
