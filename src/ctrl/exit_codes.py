"""Statuses the runner derives on its own.

Any other status comes from the caller, through ``exit(code)`` or an
``int`` returned by ``main``.
"""

from __future__ import annotations

SUCCESS: int = 0
"""``exit(0)``: a clean stop requested from below ``main``."""

GENERAL_ERROR: int = 1
"""``main`` returned an error that is not an :class:`~ctrl.exceptions.ExitSignal`."""
