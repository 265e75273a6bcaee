"""Construction and recognition of exit signals.

The constructors are meant to be *returned* (or raised) from ``main`` or
anything it calls::

    def main() -> BaseException | None:
        if not config_path.exists():
            return ctrl.fatalf("no config at %s", config_path)
        ...

Recognition is a capability check over the exception graph rather than
a type test on the outermost value, so a signal wrapped by an
intermediate layer (``raise LoadError(...) from signal``) or collected
into an exception group still carries its code to the runner.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping

from ctrl import exit_codes
from ctrl.exceptions import ExitMessage, ExitSignal
from ctrl.infra import logsink


# ---------------------------------------------------------------------------
# Constructors
# ---------------------------------------------------------------------------

def exit(code: int) -> ExitSignal:  # noqa: A001
    """Return a request to exit with *code*.  Nothing is logged."""
    return ExitSignal(code)


def _format(fmt: str, args: tuple[object, ...]) -> str:
    """Apply *args* to *fmt* printf-style without ever raising.

    A single mapping argument feeds ``%(name)s`` fields, as in
    :class:`logging.LogRecord`.  When the format and the arguments do not
    match, the format is kept verbatim and the arguments are appended.
    """
    if not args:
        return fmt
    values: object = args
    if len(args) == 1 and isinstance(args[0], Mapping) and args[0]:
        values = args[0]
    try:
        return fmt % values
    except (TypeError, ValueError, KeyError):
        return f"{fmt} {args!r}"


def exitf(code: int, fmt: str, *args: object) -> ExitSignal:
    """Log a formatted message and return a request to exit with *code*.

    *fmt* is applied printf-style (``fmt % args``); with no *args* it is
    used verbatim, so a literal ``%`` needs no escaping.  A mismatch
    between *fmt* and *args* never raises.  The line is written
    immediately, independent of whichever hook is installed.
    """
    message = _format(fmt, args)
    logsink.log_line(message)
    return ExitSignal(code, ExitMessage(message))


def fatalf(fmt: str, *args: object) -> ExitSignal:
    """Shorthand for ``exitf(1, fmt, *args)``."""
    return exitf(exit_codes.GENERAL_ERROR, fmt, *args)


# ---------------------------------------------------------------------------
# Recognition
# ---------------------------------------------------------------------------

def _walk(err: BaseException) -> Iterator[BaseException]:
    """Yield *err* and everything it wraps, depth first, each once."""
    seen: set[int] = set()
    stack: list[BaseException] = [err]
    while stack:
        current = stack.pop()
        if id(current) in seen:
            continue
        seen.add(id(current))
        yield current

        if current.__cause__ is not None:
            stack.append(current.__cause__)
        nested = getattr(current, "exceptions", None)
        if isinstance(nested, (list, tuple)):
            stack.extend(
                reversed([e for e in nested if isinstance(e, BaseException)])
            )


def as_exit_signal(err: BaseException | None) -> ExitSignal | None:
    """Return the first :class:`ExitSignal` reachable from *err*, if any.

    *err* itself is checked first, then the members of an exception
    group, then the explicit ``__cause__`` chain.  Implicit context
    (``__context__``) is not followed: an error that merely happened
    while handling a signal does not inherit its code.
    """
    if err is None:
        return None
    for candidate in _walk(err):
        if isinstance(candidate, ExitSignal):
            return candidate
    return None


def classify(err: BaseException) -> tuple[int, BaseException | None]:
    """Resolve *err* into the ``(code, err)`` pair handed to the hook.

    Returns
    -------
    tuple[int, BaseException | None]
        * A bare signal yields its code and its cause.
        * A wrapped signal yields the inner code and the original *err*.
        * Anything else yields :data:`~ctrl.exit_codes.GENERAL_ERROR`
          and *err* unchanged.
    """
    signal = as_exit_signal(err)
    if signal is None:
        return exit_codes.GENERAL_ERROR, err
    if signal is err:
        return signal.code, signal.cause
    return signal.code, err
