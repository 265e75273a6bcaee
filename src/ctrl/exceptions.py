"""Exception hierarchy for ctrl.

Every error value produced by this package inherits from
:class:`CtrlError`, with one deliberate exception:
:class:`TerminationPanic` derives from :class:`BaseException` so that it
unwinds through ``except Exception`` handlers exactly like the
:class:`SystemExit` it stands in for.

Hierarchy
---------
CtrlError
├── ExitSignal
├── ExitMessage
└── DependencyError

BaseException
└── TerminationPanic
"""

from __future__ import annotations


class CtrlError(Exception):
    """Base exception for all ctrl errors."""


# --- Termination requests --------------------------------------------------

class ExitSignal(CtrlError):
    """A request to end the process with a specific status code.

    Return (or raise) one of these from anywhere below the runner to
    stop the program with :attr:`code`.  The signal is read-only once
    constructed.

    Parameters
    ----------
    code:
        Process status handed to the termination strategy.  It is the
        sole authoritative status; *cause* never influences it.
    cause:
        Optional underlying error, used only for reporting.
    """

    def __init__(self, code: int, cause: BaseException | None = None) -> None:
        super().__init__(code, cause)
        self._code: int = code
        self._cause: BaseException | None = cause

    @property
    def code(self) -> int:
        """The requested process exit status."""
        return self._code

    @property
    def cause(self) -> BaseException | None:
        """The descriptive error attached to this request, if any."""
        return self._cause

    def __str__(self) -> str:
        if self._cause is not None:
            return str(self._cause)
        return f"exit {self._code}"

    def __repr__(self) -> str:
        return f"ExitSignal(code={self._code!r}, cause={self._cause!r})"


class ExitMessage(CtrlError):
    """Formatted message attached by :func:`~ctrl.core.signals.exitf`.

    The message has already been written to the log when this error is
    built, so the default hook does not log it a second time.
    """


# --- Environment -----------------------------------------------------------

class DependencyError(CtrlError):
    """Raised when an optional third-party package is not importable."""


# --- Test instrumentation --------------------------------------------------

class TerminationPanic(BaseException):
    """Raised in place of process termination while panic mode is on.

    Attributes
    ----------
    code : int
        The status the process would have exited with.
    error : BaseException | None
        The error value returned by ``main`` that triggered termination.
    """

    def __init__(self, code: int, error: BaseException | None = None) -> None:
        super().__init__(code, error)
        self.code: int = code
        self.error: BaseException | None = error

    def __str__(self) -> str:
        if self.error is not None:
            return f"exit {self.code}: {self.error}"
        return f"exit {self.code}"
