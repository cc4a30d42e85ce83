"""Assertion engine: dispatch policy, matchers and failure diagnostics."""

from loadassert.assertions.base import UNDEFINED, AssertionResult, FailureMode
from loadassert.assertions.diagnostics import DiagnosticContext
from loadassert.assertions.dispatch import assert_, assert_equals, dispatch
from loadassert.assertions.expect import Expectation, expect, expectation, soft_expectation

__all__ = [
    "UNDEFINED",
    "AssertionResult",
    "DiagnosticContext",
    "Expectation",
    "FailureMode",
    "assert_",
    "assert_equals",
    "dispatch",
    "expect",
    "expectation",
    "soft_expectation",
]
