"""
Tests for WrappedError, wrap_error and wrap.
"""

import pytest
from ff_leveled_logger import LoggerNotInitializedError, WrappedError, wrap, wrap_error


def fail():
    raise ValueError("disk full")


def report(error):
    return wrap(error)


class TestWrapError:
    """Test building wrapped errors from a message."""

    @pytest.mark.parametrize("message", ["x", "connection refused", "line one\nline two"])
    def test_str_is_message(self, message):
        """Test that str() returns only the message."""
        err = wrap_error(message)
        assert str(err) == message
        assert err.message == message

    def test_stack_trace_is_captured(self):
        """Test that a stack trace is captured."""
        err = wrap_error("boom")

        assert err.stack_trace
        assert err.stack_trace.startswith("Stack (most recent call last):")
        assert "test_stack_trace_is_captured" in err.stack_trace

    def test_stack_ends_at_caller(self):
        """Test that internal frames are left out of the stack."""
        err = wrap_error("boom")

        assert "_capture_stack" not in err.stack_trace
        assert "in wrap_error" not in err.stack_trace

    def test_is_an_exception(self):
        """Test that wrapped errors can be raised."""
        with pytest.raises(WrappedError, match="boom"):
            raise wrap_error("boom")

    def test_attributes_are_read_only(self):
        """Test that message cannot be reassigned."""
        err = wrap_error("boom")
        with pytest.raises(AttributeError):
            err.message = "other"


class TestWrap:
    """Test wrapping existing errors."""

    def test_message_is_taken_from_error(self):
        """Test that wrap keeps the error's message."""
        try:
            fail()
        except ValueError as e:
            wrapped = report(e)

        assert str(wrapped) == "disk full"
        assert isinstance(wrapped, WrappedError)

    def test_stack_reflects_wrap_site_not_origin(self):
        """Test that the stack shows the wrap site, not the raise site."""
        try:
            fail()
        except ValueError as e:
            wrapped = report(e)

        assert "in report\n" in wrapped.stack_trace
        assert "in fail\n" not in wrapped.stack_trace

    def test_original_error_is_cause(self):
        """Test that the wrapped exception becomes __cause__."""
        original = ValueError("disk full")
        wrapped = wrap(original)
        assert wrapped.__cause__ is original

    def test_non_exception_values(self):
        """Test wrapping a plain value."""
        wrapped = wrap("plain text")

        assert str(wrapped) == "plain text"
        assert wrapped.__cause__ is None
        assert wrapped.stack_trace

    def test_wrapping_a_wrapped_error_recaptures_stack(self):
        """Test that rewrapping captures a new stack."""
        inner = wrap_error("inner")
        outer = report(inner)

        assert str(outer) == "inner"
        assert outer.stack_trace != inner.stack_trace


def test_not_initialized_error_is_runtime_error():
    """Test the not-initialized error type and message."""
    assert issubclass(LoggerNotInitializedError, RuntimeError)
    assert "init()" in str(LoggerNotInitializedError())
