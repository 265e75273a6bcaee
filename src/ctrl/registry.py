"""Process-wide runner configuration.

Holds the hook, the termination strategy and the panic-mode flag that
:func:`~ctrl.core.runner.run` consults.  This is plain module state
without locking: configure it during process or test setup, before any
concurrent work calls ``run``.  ``run`` itself only reads it.
"""

from __future__ import annotations

from dataclasses import dataclass

from ctrl.core.hooks import default_hook
from ctrl.core.protocols import Hook, Terminator
from ctrl.infra.termination import exit_process


@dataclass(frozen=True, slots=True)
class Settings:
    """Immutable snapshot of the registry, for save/restore."""

    hook: Hook
    terminator: Terminator
    panic: bool


DEFAULTS = Settings(hook=default_hook, terminator=exit_process, panic=False)

_current: Settings = DEFAULTS


def set_hook(fn: Hook | None) -> None:
    """Install *fn* as the hook for every later ``run``.

    The previous hook is discarded, not chained.  ``None`` reinstalls
    :func:`~ctrl.core.hooks.default_hook`.
    """
    global _current
    _current = Settings(
        fn if fn is not None else DEFAULTS.hook,
        _current.terminator,
        _current.panic,
    )


def set_terminator(fn: Terminator | None) -> None:
    """Install *fn* as the termination strategy; ``None`` restores the default."""
    global _current
    _current = Settings(
        _current.hook,
        fn if fn is not None else DEFAULTS.terminator,
        _current.panic,
    )


def set_panic(enabled: bool) -> None:
    """Turn panic mode on or off.

    While on, termination raises :class:`~ctrl.exceptions.TerminationPanic`
    instead of calling the termination strategy, so a test can catch it.
    """
    global _current
    _current = Settings(_current.hook, _current.terminator, bool(enabled))


def get_hook() -> Hook:
    return _current.hook


def get_terminator() -> Terminator:
    return _current.terminator


def panic_enabled() -> bool:
    return _current.panic


def snapshot() -> Settings:
    """Return the current configuration."""
    return _current


def restore(settings: Settings) -> None:
    """Reinstate a configuration previously returned by :func:`snapshot`."""
    global _current
    _current = settings


def reset() -> None:
    """Return to production defaults."""
    restore(DEFAULTS)
