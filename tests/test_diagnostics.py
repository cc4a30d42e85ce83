"""Tests for failure message construction."""

import sys

import pytest

from loadassert import DiagnosticContext, IterationAborted, configure, expect
from loadassert.assertions.diagnostics import (
    Described,
    build_failure_message,
    find_origin,
    format_value,
)
from loadassert.colors import ANSI_COLORS, colorize
from loadassert.config import AssertConfig


def test_colorize_wraps_text():
    assert colorize("x", "green") == "\x1b[32mx\x1b[0m"
    assert colorize(None, "red") == "\x1b[31mNone\x1b[0m"


def test_colorize_unknown_color():
    with pytest.raises(KeyError):
        colorize("x", "chartreuse")


def test_format_value():
    assert format_value("sun") == "'sun'"
    assert format_value(Described("> 3")) == "> 3"
    assert format_value(int) == "int"
    assert format_value((str, int)) == "str | int"
    assert format_value("x" * 500).endswith("...")
    assert len(format_value("x" * 500)) == 200


def test_format_value_survives_broken_repr():
    class Broken:
        def __repr__(self):
            raise RuntimeError("no repr")

    assert "unrepresentable Broken" in format_value(Broken())


def test_context_render_plain():
    ctx = DiagnosticContext(actual="sun", expected=Described("undefined"), origin="s.py:3 in f")
    assert ctx.render(colors=False) == (
        "  Expected: undefined\n  Received: 'sun'\n  At: s.py:3 in f"
    )


def test_context_render_colors():
    ctx = DiagnosticContext(actual=1, expected=2)
    rendered = ctx.render(colors=True)
    assert f"{ANSI_COLORS['green']}2{ANSI_COLORS['reset']}" in rendered
    assert f"{ANSI_COLORS['red']}1{ANSI_COLORS['reset']}" in rendered
    assert "At:" not in rendered


def test_build_failure_message_layout():
    message = build_failure_message("sun", "to be undefined", Described("undefined"), origin="here")
    assert message == (
        "Expected value 'sun' to be undefined\n"
        "\n"
        "  Expected: undefined\n"
        "  Received: 'sun'\n"
        "  At: here"
    )


def test_origin_points_at_caller():
    origin = find_origin()
    assert origin is not None
    assert origin.startswith(__file__)
    assert origin.endswith("in test_origin_points_at_caller")


def test_failure_message_includes_call_site():
    with pytest.raises(IterationAborted) as exc_info:
        expect(1).to_be(2)
    assert f"At: {__file__}:" in exc_info.value.message
    assert "in test_failure_message_includes_call_site" in exc_info.value.message


def test_show_origin_disabled():
    configure(AssertConfig(colors=False, show_origin=False))
    with pytest.raises(IterationAborted) as exc_info:
        expect(1).to_be(2)
    assert "At:" not in exc_info.value.message


def test_colors_enabled_in_messages():
    configure(AssertConfig(colors=True))
    with pytest.raises(IterationAborted) as exc_info:
        expect("actual").to_be("expected")
    message = exc_info.value.message
    assert colorize("'expected'", "green") in message
    assert colorize("'actual'", "red") in message


def test_derived_expected_description():
    with pytest.raises(IterationAborted) as exc_info:
        expect(1).to_be_greater_than(3)
    assert "  Expected: > 3\n  Received: 1" in exc_info.value.message


def test_pass_path_builds_no_diagnostics(monkeypatch):
    def explode(*args, **kwargs):
        raise AssertionError("diagnostics built on the pass path")

    monkeypatch.setattr(sys.modules["loadassert.assertions.expect"], "build_failure_message", explode)
    monkeypatch.setattr(sys.modules["loadassert.assertions.expect"], "format_value", explode)
    expect(1).to_be(1)
    expect([1]).to_equal([1])
    expect(5).to_be_close_to(5.001)
    expect([1]).to_have_length(1)
