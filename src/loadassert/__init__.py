"""Hard and soft assertions for load-test iteration scripts."""

from loadassert.assertions import (
    UNDEFINED,
    AssertionResult,
    DiagnosticContext,
    Expectation,
    FailureMode,
    assert_,
    assert_equals,
    dispatch,
    expect,
    expectation,
    soft_expectation,
)
from loadassert.config import AssertConfig, configure, get_config, load_config
from loadassert.controller import (
    ExecutionController,
    IterationAborted,
    IterationController,
    IterationState,
    bound,
    current_controller,
    iteration,
)
from loadassert.verbose import setup_logger

__version__ = "0.1.0"

__all__ = [
    "UNDEFINED",
    "AssertConfig",
    "AssertionResult",
    "DiagnosticContext",
    "ExecutionController",
    "Expectation",
    "FailureMode",
    "IterationAborted",
    "IterationController",
    "IterationState",
    "assert_",
    "assert_equals",
    "bound",
    "configure",
    "current_controller",
    "dispatch",
    "expect",
    "expectation",
    "get_config",
    "iteration",
    "load_config",
    "setup_logger",
    "soft_expectation",
]
