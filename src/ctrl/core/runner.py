"""The runner: executes ``main`` and turns its outcome into an exit.

Outcomes of ``main``
--------------------
* ``None``: :func:`run` returns normally.  Nothing else happens.
* An :class:`~ctrl.exceptions.ExitSignal`, returned or raised: the hook
  and the termination strategy are called with the signal's code.
* Any other exception *instance* returned: same path with code 1.
* An ``int``: treated as ``exit(code)``, matching the
  ``sys.exit(main())`` convention.
* Any other raised exception propagates unchanged.  It is a bug, not an
  exit request, and never reaches the hook.

A non-``None`` result always terminates, even when its code is 0.
"""

from __future__ import annotations

import functools
from collections.abc import Callable

from ctrl import registry
from ctrl.core.protocols import Hook, Terminator
from ctrl.core.signals import classify
from ctrl.exceptions import ExitSignal, TerminationPanic

MainResult = BaseException | int | None
MainFunc = Callable[[], MainResult]


def _as_error(result: object) -> BaseException:
    """Normalise a non-``None`` result of ``main`` into an error value."""
    if isinstance(result, BaseException):
        return result
    if isinstance(result, int) and not isinstance(result, bool):
        return ExitSignal(result)
    raise TypeError(
        "main must return None, an int or an exception instance, "
        f"not {type(result).__name__}"
    )


class Runner:
    """Runs a ``main`` callable under the termination protocol.

    Parameters
    ----------
    hook:
        Hook to report through.  ``None`` (default) reads the process-wide
        hook from :mod:`ctrl.registry` on every run.
    terminator:
        Termination strategy.  ``None`` reads the process-wide one.
    panic:
        Panic-mode override.  ``None`` reads the process-wide flag.
    """

    def __init__(
        self,
        *,
        hook: Hook | None = None,
        terminator: Terminator | None = None,
        panic: bool | None = None,
    ) -> None:
        self._hook: Hook | None = hook
        self._terminator: Terminator | None = terminator
        self._panic: bool | None = panic

    # ------------------------------------------------------------------
    # Dependency resolution
    # ------------------------------------------------------------------

    @property
    def hook(self) -> Hook:
        return self._hook if self._hook is not None else registry.get_hook()

    @property
    def terminator(self) -> Terminator:
        if self._terminator is not None:
            return self._terminator
        return registry.get_terminator()

    @property
    def panic(self) -> bool:
        return self._panic if self._panic is not None else registry.panic_enabled()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def run(self, main: MainFunc) -> None:
        """Call *main* and act on its outcome.

        Returns only when *main* returns ``None`` or a substituted
        termination strategy returns.

        Raises
        ------
        TerminationPanic
            In panic mode, instead of terminating.
        TypeError
            When *main* returns a value of an unsupported type.
        """
        try:
            result = main()
        except ExitSignal as signal:
            result = signal

        if result is None:
            return

        err = _as_error(result)
        code, reported = classify(err)
        self.hook(code, reported)
        self.terminate(code, err)

    def terminate(self, code: int, err: BaseException | None = None) -> None:
        """End the process with *code*, or raise in panic mode."""
        if self.panic:
            raise TerminationPanic(code, err)
        self.terminator(code)


def run(main: MainFunc) -> None:
    """Run *main* with the process-wide configuration.

    See :class:`Runner` for the exact behaviour.
    """
    Runner().run(main)


def entrypoint(main: MainFunc) -> Callable[[], None]:
    """Wrap *main* so that calling the wrapper runs it through :func:`run`.

    Suitable as a ``[project.scripts]`` target::

        @ctrl.entrypoint
        def main() -> BaseException | None:
            ...
    """

    @functools.wraps(main)
    def wrapper() -> None:
        run(main)

    return wrapper
