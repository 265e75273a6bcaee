"""Tests for exit-signal construction and recognition (core/signals.py).

Coverage:
* ``exit`` builds a signal without logging.
* ``exitf`` / ``fatalf`` format, log once and attach the message.
* ``as_exit_signal`` sees through ``__cause__`` chains and groups.
* ``classify`` resolves the hook arguments.
"""

from __future__ import annotations

import io
import re
import sys

import pytest

from ctrl import exit_codes
from ctrl.core.signals import as_exit_signal, classify, exit, exitf, fatalf
from ctrl.exceptions import ExitMessage, ExitSignal

LINE_RE = re.compile(r"^\d{4}/\d{2}/\d{2} \d{2}:\d{2}:\d{2} (?P<msg>.*)\n$")


def _wrap(inner: BaseException, message: str = "outer") -> RuntimeError:
    outer = RuntimeError(message)
    outer.__cause__ = inner
    return outer


# ---------------------------------------------------------------------------
# Constructors
# ---------------------------------------------------------------------------

class TestExit:
    def test_carries_code_without_cause(self) -> None:
        sig = exit(3)
        assert isinstance(sig, ExitSignal)
        assert sig.code == 3
        assert sig.cause is None

    def test_does_not_log(self, log_buffer: io.StringIO) -> None:
        exit(2)
        assert log_buffer.getvalue() == ""


class TestExitf:
    def test_formats_and_logs_one_line(self, log_buffer: io.StringIO) -> None:
        sig = exitf(4, "bad %s at %d", "thing", 12)

        match = LINE_RE.match(log_buffer.getvalue())
        assert match is not None
        assert match.group("msg") == "bad thing at 12"
        assert sig.code == 4
        assert isinstance(sig.cause, ExitMessage)
        assert str(sig) == "bad thing at 12"

    def test_without_args_uses_format_verbatim(self, log_buffer: io.StringIO) -> None:
        sig = exitf(1, "100% done")
        assert str(sig.cause) == "100% done"
        assert log_buffer.getvalue().endswith(" 100% done\n")

    def test_trailing_newline_not_doubled(self, log_buffer: io.StringIO) -> None:
        exitf(1, "msg\n")
        assert log_buffer.getvalue().endswith(" msg\n")
        assert not log_buffer.getvalue().endswith("\n\n")

    @pytest.mark.parametrize(
        ("fmt", "args", "expected"),
        [
            ("%d and %d", (1,), "%d and %d (1,)"),
            ("100%", (5,), "100% (5,)"),
            ("%d", ("x",), "%d ('x',)"),
            ("%s", (1, 2), "%s (1, 2)"),
        ],
    )
    def test_mismatched_format_never_raises(
        self,
        fmt: str,
        args: tuple[object, ...],
        expected: str,
        log_buffer: io.StringIO,
    ) -> None:
        sig = exitf(2, fmt, *args)

        assert isinstance(sig, ExitSignal)
        assert sig.code == 2
        assert str(sig) == expected
        match = LINE_RE.match(log_buffer.getvalue())
        assert match is not None
        assert match.group("msg") == expected

    def test_single_mapping_feeds_named_fields(self, log_buffer: io.StringIO) -> None:
        sig = exitf(1, "%(name)s failed with %(status)d", {"name": "sync", "status": 3})
        assert str(sig) == "sync failed with 3"
        assert log_buffer.getvalue().endswith(" sync failed with 3\n")

    def test_mapping_with_missing_key_never_raises(self, log_buffer: io.StringIO) -> None:
        sig = exitf(3, "%(missing)s", {"x": 1})
        assert sig.code == 3
        assert str(sig) == "%(missing)s ({'x': 1},)"
        assert log_buffer.getvalue().count("\n") == 1

    @pytest.mark.parametrize("code", range(6))
    def test_logs_regardless_of_code(self, code: int, log_buffer: io.StringIO) -> None:
        exitf(code, "msg")
        assert log_buffer.getvalue().endswith(" msg\n")


class TestFatalf:
    def test_equivalent_to_exitf_one(self, log_buffer: io.StringIO) -> None:
        fatal = fatalf("badness: %d", 25)
        fatal_line = LINE_RE.match(log_buffer.getvalue())
        log_buffer.seek(0)
        log_buffer.truncate()
        explicit = exitf(1, "badness: %d", 25)
        explicit_line = LINE_RE.match(log_buffer.getvalue())

        assert fatal.code == explicit.code == exit_codes.GENERAL_ERROR
        assert str(fatal) == str(explicit) == "badness: 25"
        assert fatal_line is not None and explicit_line is not None
        assert fatal_line.group("msg") == explicit_line.group("msg")

    def test_mismatched_format_never_raises(self, log_buffer: io.StringIO) -> None:
        sig = fatalf("badness: %d %d", 25)
        assert sig.code == exit_codes.GENERAL_ERROR
        assert log_buffer.getvalue().endswith(" badness: %d %d (25,)\n")


# ---------------------------------------------------------------------------
# ExitSignal value
# ---------------------------------------------------------------------------

class TestExitSignal:
    def test_str_without_cause(self) -> None:
        assert str(ExitSignal(5)) == "exit 5"

    def test_str_with_cause(self) -> None:
        assert str(ExitSignal(5, ValueError("nope"))) == "nope"

    def test_is_read_only(self) -> None:
        sig = ExitSignal(1)
        with pytest.raises(AttributeError):
            sig.code = 2  # type: ignore[misc]

    def test_repr(self) -> None:
        assert repr(ExitSignal(2)) == "ExitSignal(code=2, cause=None)"


# ---------------------------------------------------------------------------
# Recognition
# ---------------------------------------------------------------------------

class TestAsExitSignal:
    def test_none(self) -> None:
        assert as_exit_signal(None) is None

    def test_plain_error(self) -> None:
        assert as_exit_signal(ValueError("x")) is None

    def test_direct(self) -> None:
        sig = exit(2)
        assert as_exit_signal(sig) is sig

    def test_cause_chain(self) -> None:
        sig = exit(6)
        assert as_exit_signal(_wrap(_wrap(sig))) is sig

    def test_context_is_not_followed(self) -> None:
        err = ValueError("while handling")
        err.__context__ = exit(6)
        assert as_exit_signal(err) is None

    def test_outermost_signal_wins(self) -> None:
        inner = exit(2)
        outer = ExitSignal(3)
        outer.__cause__ = inner
        assert as_exit_signal(outer) is outer

    def test_cycle_terminates(self) -> None:
        first = RuntimeError("a")
        second = RuntimeError("b")
        first.__cause__ = second
        second.__cause__ = first
        assert as_exit_signal(first) is None

    @pytest.mark.skipif(sys.version_info < (3, 11), reason="ExceptionGroup is 3.11+")
    def test_exception_group(self) -> None:
        sig = exit(8)
        group = ExceptionGroup("many", [ValueError("x"), _wrap(sig)])  # noqa: F821
        assert as_exit_signal(group) is sig


class TestClassify:
    def test_plain_error(self) -> None:
        err = ValueError("x")
        assert classify(err) == (1, err)

    def test_bare_signal_reports_cause(self) -> None:
        cause = ValueError("why")
        assert classify(ExitSignal(4, cause)) == (4, cause)

    def test_bare_signal_without_cause(self) -> None:
        assert classify(exit(0)) == (0, None)

    def test_wrapped_signal_reports_wrapper(self) -> None:
        outer = _wrap(exit(9))
        assert classify(outer) == (9, outer)
