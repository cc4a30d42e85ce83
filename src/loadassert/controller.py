"""Per-iteration execution control: aborting and recording checks.

A load-testing host runs a script body once per iteration. Hard failures
end that iteration; soft failures are recorded against it while the body
keeps running. ``IterationController`` is an in-process implementation of
that contract, bound to the current context so parallel iterations on
different threads never see each other's state.
"""

from __future__ import annotations

import contextvars
import logging
from contextlib import contextmanager
from enum import Enum
from typing import Iterator, NoReturn, Protocol

from loadassert.assertions.base import AssertionResult
from loadassert.config import get_config

logger = logging.getLogger(__name__)


class IterationAborted(BaseException):
    """Unwinds the current iteration after a hard failure.

    Derives from BaseException so ``except Exception`` blocks in a script
    body do not swallow the abort.
    """

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.exit_code = exit_code if exit_code is not None else get_config().abort_exit_code


class ExecutionController(Protocol):
    def abort_iteration(self, message: str) -> NoReturn: ...

    def record_check(self, label: str, passed: bool) -> None: ...


class IterationState(str, Enum):
    RUNNING = "running"
    ABORTED = "aborted"
    COMPLETED = "completed"


class IterationController:
    """Tracks one iteration from RUNNING to ABORTED or COMPLETED."""

    def __init__(self, name: str = "iteration"):
        self.name = name
        self.state = IterationState.RUNNING
        self.checks: list[AssertionResult] = []
        self.abort_message: str | None = None
        self.implicit = False

    @property
    def had_soft_failure(self) -> bool:
        return any(not c.passed for c in self.checks)

    @property
    def failed(self) -> bool:
        return self.state is IterationState.ABORTED or self.had_soft_failure

    @property
    def exit_code(self) -> int:
        if self.state is IterationState.ABORTED:
            return get_config().abort_exit_code
        return 1 if self.had_soft_failure else 0

    def _require_running(self, action: str) -> None:
        if self.state is not IterationState.RUNNING:
            raise RuntimeError(
                f"Cannot {action} {self.name}: iteration is already {self.state.value}"
            )

    def abort_iteration(self, message: str) -> NoReturn:
        self._require_running("abort")
        self.state = IterationState.ABORTED
        self.abort_message = message
        logger.debug(f"{self.name} aborted")
        raise IterationAborted(message)

    def record_check(self, label: str, passed: bool) -> None:
        self._require_running("record a check on")
        self.checks.append(AssertionResult.from_label(label, passed))
        logger.debug(f"{self.name} recorded check passed={passed}")

    def complete(self) -> None:
        self._require_running("complete")
        self.state = IterationState.COMPLETED
        logger.debug(
            f"{self.name} completed, {len(self.checks)} check(s), "
            f"had_soft_failure={self.had_soft_failure}"
        )


_current: contextvars.ContextVar[ExecutionController | None] = contextvars.ContextVar(
    "loadassert_controller", default=None
)


def current_controller() -> ExecutionController:
    """Return the controller for this context.

    Outside ``bound``/``iteration`` a controller is created on first use. It
    is replaced once it reaches a terminal state, so a reused thread starts
    its next iteration RUNNING again. Soft failures do not end it: they keep
    accumulating in ``checks`` and ``had_soft_failure`` stays set until the
    host calls ``complete()``. Hosts that reuse threads should wrap each
    body in ``iteration()`` or complete the implicit controller themselves.
    """
    controller = _current.get()
    stale = (
        isinstance(controller, IterationController)
        and controller.implicit
        and controller.state is not IterationState.RUNNING
    )
    if controller is None or stale:
        controller = IterationController()
        controller.implicit = True
        _current.set(controller)
    return controller


@contextmanager
def bound(controller: ExecutionController) -> Iterator[ExecutionController]:
    """Make *controller* the active controller inside the block."""
    token = _current.set(controller)
    try:
        yield controller
    finally:
        _current.reset(token)


@contextmanager
def iteration(
    controller: IterationController | None = None,
) -> Iterator[IterationController]:
    """Bind a controller for the duration of one iteration body.

    The abort raised by a hard failure stops at this boundary and leaves the
    controller ABORTED. A body that finishes normally leaves it COMPLETED.
    Any other exception propagates.
    """
    controller = controller if controller is not None else IterationController()
    try:
        with bound(controller):
            yield controller
    except IterationAborted as exc:
        if controller.state is IterationState.RUNNING:
            # Abort raised by another controller or by hand
            controller.state = IterationState.ABORTED
            controller.abort_message = exc.message
        logger.info(f"{controller.name} aborted: {exc.message}")
    else:
        if controller.state is IterationState.RUNNING:
            controller.complete()
