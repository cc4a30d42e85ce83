"""Routing of failed checks to the execution controller."""

from __future__ import annotations

import logging
from typing import Any

from loadassert.assertions.base import FailureMode
from loadassert.assertions.equality import strict_equals
from loadassert.controller import ExecutionController, IterationAborted, current_controller

logger = logging.getLogger(__name__)


def dispatch(
    verdict: bool,
    message: str,
    mode: FailureMode | str,
    controller: ExecutionController | None = None,
) -> None:
    """Act on a verdict according to *mode*.

    A passing verdict does nothing. A failing HARD verdict aborts the
    iteration and never returns. A failing SOFT verdict registers a failed
    check and returns so the script keeps running. *mode* may be given as
    its string value; anything else raises ValueError.
    """
    mode = FailureMode(mode)
    if verdict:
        return

    if controller is None:
        controller = current_controller()

    if mode is FailureMode.HARD:
        logger.error(f"test aborted: {message}")
        controller.abort_iteration(message)
        # abort_iteration must not return; enforce it for foreign controllers
        raise IterationAborted(message)

    logger.warning(f"check failed: {message}")
    controller.record_check(message, False)


def assert_(condition: Any, message: str, soft: bool = False) -> None:
    """Check that *condition* holds.

    By default a failure aborts the iteration. Pass ``soft=True`` to mark the
    iteration as failed and continue instead.
    """
    dispatch(bool(condition), message, FailureMode.SOFT if soft else FailureMode.HARD)


def assert_equals(lhs: Any, rhs: Any, message: str, soft: bool = False) -> None:
    """Check that *lhs* and *rhs* are strictly equal (no deep comparison)."""
    assert_(strict_equals(lhs, rhs), message, soft)
