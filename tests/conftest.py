"""Shared pytest fixtures and configuration for the ctrl test suite.

Guidelines
----------
* No test may end the interpreter: termination is observed through
  panic mode or an injected terminator.
* Registry state and log output are reset around every test.
"""

from __future__ import annotations

import io
from collections.abc import Iterator

import pytest

from ctrl import registry
from ctrl.infra import logsink


@pytest.fixture(autouse=True)
def _isolate_ctrl_state() -> Iterator[None]:
    registry.reset()
    yield
    registry.reset()
    logsink.set_output(None)


@pytest.fixture
def log_buffer() -> Iterator[io.StringIO]:
    """Capture log-sink output in a string buffer."""
    buf = io.StringIO()
    logsink.set_output(buf)
    yield buf
    logsink.set_output(None)
