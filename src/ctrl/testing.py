"""Helpers for testing code that ends in :func:`ctrl.run`.

:func:`capture_exit` turns termination into an observable result::

    with capture_exit() as record:
        ctrl.run(main)
    assert record.code == 2

:class:`RecordingTerminator` is a termination strategy that records the
code and returns, for tests that inject it into a
:class:`~ctrl.core.runner.Runner` instead of using panic mode.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field

from ctrl import registry
from ctrl.core.protocols import Hook
from ctrl.exceptions import TerminationPanic


@dataclass(slots=True)
class ExitRecord:
    """What happened inside a :func:`capture_exit` block."""

    code: int | None = None
    """Exit status, or ``None`` if the block did not terminate."""

    error: BaseException | None = None
    """Error value returned by ``main``, as carried by the panic."""

    hook_calls: list[tuple[int, BaseException | None]] = field(default_factory=list)
    """Every ``(code, err)`` pair the hook received, in order."""

    @property
    def exited(self) -> bool:
        return self.code is not None


@dataclass(slots=True)
class RecordingTerminator:
    """Termination strategy that appends each code to :attr:`codes`."""

    codes: list[int] = field(default_factory=list)

    def __call__(self, code: int) -> None:
        self.codes.append(code)


@contextmanager
def capture_exit(hook: Hook | None = None) -> Iterator[ExitRecord]:
    """Run the body with panic mode on and record any termination.

    The hook calls are recorded and, when *hook* is given, forwarded to
    it.  The previous registry configuration is restored on the way out,
    whatever happens.  Exceptions other than
    :class:`~ctrl.exceptions.TerminationPanic` propagate.
    """
    saved = registry.snapshot()
    record = ExitRecord()

    def recording_hook(code: int, err: BaseException | None) -> None:
        record.hook_calls.append((code, err))
        if hook is not None:
            hook(code, err)

    registry.set_hook(recording_hook)
    registry.set_panic(True)
    try:
        yield record
    except TerminationPanic as exc:
        record.code = exc.code
        record.error = exc.error
    finally:
        registry.restore(saved)
