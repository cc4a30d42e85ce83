"""Expectations: a captured value plus a set of matchers to test it.

    expect(response.status).to_be(200)
    expect.soft(body["items"]).to_have_length(10)

``expect`` aborts the iteration on the first failed matcher; ``expect.soft``
records the failure and lets the script continue. Each matcher builds its
diagnostic only when it fails.
"""

from __future__ import annotations

import math
from collections.abc import Sized
from dataclasses import dataclass
from typing import Any, Generic, Protocol, TypeVar

from loadassert.assertions.base import UNDEFINED, FailureMode
from loadassert.assertions.diagnostics import Described, build_failure_message, format_value
from loadassert.assertions.dispatch import dispatch
from loadassert.assertions.equality import is_nan, strict_equals, structural_equals

T = TypeVar("T")


class SupportsOrdering(Protocol):
    def __lt__(self, other: Any, /) -> bool: ...

    def __gt__(self, other: Any, /) -> bool: ...

    def __le__(self, other: Any, /) -> bool: ...

    def __ge__(self, other: Any, /) -> bool: ...


class SupportsSubtraction(Protocol):
    def __sub__(self, other: Any, /) -> Any: ...


def is_truthy(value: Any) -> bool:
    """Truthiness with NaN and UNDEFINED counted as falsy."""
    if is_nan(value):
        return False
    return bool(value)


@dataclass(frozen=True)
class Expectation(Generic[T]):
    """A subject bound to a failure mode, checked by exactly one matcher."""

    value: T
    mode: FailureMode = FailureMode.HARD

    def _check(
        self,
        verdict: bool,
        description: str,
        expected: Any = None,
        shown: str | None = None,
        **details: Any,
    ) -> None:
        """Dispatch a failure built from *description* unless *verdict* holds.

        *description* and *shown* are templates over ``{expected}`` and any
        *details*; they are only formatted on failure. *shown* replaces the
        expected value on the Expected line when the check is not a plain
        comparison against a value.
        """
        if verdict:
            return

        fields = {"expected": format_value(expected)}
        fields.update((k, format_value(v)) for k, v in details.items())
        displayed = Described(shown.format(**fields)) if shown is not None else expected

        message = build_failure_message(
            self.value, description.format(**fields), displayed
        )
        dispatch(False, message, self.mode)

    def to_be(self, expected: Any) -> None:
        """Check strict equality with *expected*, without coercion."""
        self._check(strict_equals(self.value, expected), "to be {expected}", expected)

    def to_equal(self, expected: Any) -> None:
        """Check structural equality, comparing containers by content."""
        self._check(
            structural_equals(self.value, expected), "to equal {expected}", expected
        )

    def to_be_close_to(self: Expectation[SupportsSubtraction], expected: Any, precision: float = 2) -> None:
        """Check that the value is within ``10 ** -precision`` of *expected*.

        *precision* counts decimal digits; the difference must be strictly
        smaller than the tolerance.
        """
        tolerance = 10 ** -precision
        diff = abs(self.value - expected)
        self._check(
            diff < tolerance,
            "to be close to {expected} with precision {precision}, "
            "but got a difference of {diff}",
            expected,
            shown="{expected} (+/- {tolerance})",
            precision=precision,
            diff=diff,
            tolerance=tolerance,
        )

    def to_be_defined(self) -> None:
        self._check(self.value is not UNDEFINED, "to be defined", shown="not undefined")

    def to_be_truthy(self) -> None:
        self._check(is_truthy(self.value), "to be truthy", shown="truthy")

    def to_be_falsy(self) -> None:
        self._check(not is_truthy(self.value), "to be falsy", shown="falsy")

    def to_be_greater_than(self: Expectation[SupportsOrdering], expected: Any) -> None:
        self._check(
            self.value > expected, "to be greater than {expected}", expected, shown="> {expected}"
        )

    def to_be_greater_than_or_equal(self: Expectation[SupportsOrdering], expected: Any) -> None:
        self._check(
            self.value >= expected,
            "to be greater than or equal to {expected}",
            expected,
            shown=">= {expected}",
        )

    def to_be_less_than(self: Expectation[SupportsOrdering], expected: Any) -> None:
        self._check(
            self.value < expected, "to be less than {expected}", expected, shown="< {expected}"
        )

    def to_be_less_than_or_equal(self: Expectation[SupportsOrdering], expected: Any) -> None:
        """Check ``value <= expected`` for ints, floats, Decimals or Fractions."""
        self._check(
            self.value <= expected,
            "to be less than or equal to {expected}",
            expected,
            shown="<= {expected}",
        )

    def to_be_nan(self) -> None:
        """Check the value is NaN. Non-numeric values raise TypeError."""
        self._check(math.isnan(self.value), "to be NaN", shown="nan")

    def to_be_null(self) -> None:
        self._check(self.value is None, "to be None", None)

    def to_be_undefined(self) -> None:
        self._check(self.value is UNDEFINED, "to be undefined", UNDEFINED)

    def to_be_instance_of(self, expected: type | tuple[type, ...]) -> None:
        """Check ``isinstance(value, expected)``; a tuple of types is accepted."""
        self._check(
            isinstance(self.value, expected),
            "to be an instance of {expected}",
            expected,
            shown="instance of {expected}",
        )

    def to_have_length(self: Expectation[Sized], expected: int) -> None:
        """Check ``len(value) == expected``.

        A value without ``__len__`` raises TypeError rather than failing.
        """
        length = len(self.value)
        self._check(
            strict_equals(length, expected),
            "to have a length of {expected}, but got {length}",
            expected,
            shown="length {expected}",
            length=length,
        )


def expectation(value: T, mode: FailureMode = FailureMode.HARD) -> Expectation[T]:
    """Capture *value* for a single matcher call under *mode*."""
    return Expectation(value=value, mode=FailureMode(mode))


def soft_expectation(value: T) -> Expectation[T]:
    return expectation(value, FailureMode.SOFT)


class _Expect:
    """``expect(value)`` for hard checks, ``expect.soft(value)`` for soft ones."""

    def __call__(self, value: T) -> Expectation[T]:
        return expectation(value, FailureMode.HARD)

    def soft(self, value: T) -> Expectation[T]:
        return soft_expectation(value)

    def __repr__(self) -> str:
        return "<loadassert.expect>"


expect = _Expect()
