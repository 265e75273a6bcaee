"""Single source of truth for the ctrl package version."""

from __future__ import annotations

__version__: str = "0.3.0"
