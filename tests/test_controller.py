"""Tests for the per-iteration controller and its state machine."""

import threading

import pytest

from loadassert import (
    IterationAborted,
    IterationController,
    IterationState,
    configure,
    current_controller,
    expect,
    iteration,
)
from loadassert.config import AssertConfig
from loadassert.controller import bound


def test_new_controller_is_running():
    it = IterationController()
    assert it.state is IterationState.RUNNING
    assert it.checks == []
    assert it.had_soft_failure is False
    assert it.failed is False
    assert it.exit_code == 0


def test_abort_moves_to_aborted_and_raises():
    it = IterationController()
    with pytest.raises(IterationAborted):
        it.abort_iteration("stop")
    assert it.state is IterationState.ABORTED
    assert it.failed is True
    assert it.exit_code == 108


def test_abort_exit_code_follows_config():
    configure(AssertConfig(colors=False, abort_exit_code=3))
    it = IterationController()
    with pytest.raises(IterationAborted) as exc_info:
        it.abort_iteration("stop")
    assert exc_info.value.exit_code == 3
    assert it.exit_code == 3


def test_record_check_keeps_running():
    it = IterationController()
    it.record_check("passed check", True)
    it.record_check("failed check", False)
    assert it.state is IterationState.RUNNING
    assert [c.passed for c in it.checks] == [True, False]
    assert it.had_soft_failure is True


def test_passed_checks_do_not_flag_failure():
    it = IterationController()
    it.record_check("ok", True)
    it.complete()
    assert it.failed is False
    assert it.exit_code == 0


def test_soft_failure_exit_code():
    it = IterationController()
    it.record_check("bad", False)
    it.complete()
    assert it.state is IterationState.COMPLETED
    assert it.exit_code == 1


def test_check_name_is_first_line_of_message():
    it = IterationController()
    it.record_check("Expected value 1 to equal 2\n\n  Expected: 2", False)
    assert it.checks[0].name == "Expected value 1 to equal 2"


@pytest.mark.parametrize("finish", ["complete", "abort"])
def test_terminal_states_are_final(finish):
    it = IterationController()
    if finish == "complete":
        it.complete()
    else:
        with pytest.raises(IterationAborted):
            it.abort_iteration("stop")

    with pytest.raises(RuntimeError, match="already"):
        it.complete()
    with pytest.raises(RuntimeError, match="already"):
        it.record_check("late", False)
    with pytest.raises(RuntimeError, match="already"):
        it.abort_iteration("late")


def test_iteration_completes_normally():
    with iteration() as it:
        expect(1).to_be(1)
    assert it.state is IterationState.COMPLETED


def test_iteration_propagates_other_errors():
    with pytest.raises(ZeroDivisionError):
        with iteration() as it:
            1 / 0
    assert it.state is IterationState.RUNNING


def test_iteration_absorbs_manual_abort():
    with iteration() as it:
        raise IterationAborted("raised by hand")
    assert it.state is IterationState.ABORTED
    assert it.abort_message == "raised by hand"


def test_iteration_restores_previous_controller(controller):
    with iteration() as it:
        assert current_controller() is it
    assert current_controller() is controller


def test_bound_sets_active_controller():
    it = IterationController()
    with bound(it):
        assert current_controller() is it


def test_implicit_controller_is_replaced_after_abort():
    result = {}

    def body():
        first = current_controller()
        try:
            expect(1).to_be(2)
        except IterationAborted:
            pass
        second = current_controller()
        result["first"] = first
        result["second"] = second

    thread = threading.Thread(target=body)
    thread.start()
    thread.join()

    assert result["first"].implicit is True
    assert result["first"].state is IterationState.ABORTED
    assert result["second"] is not result["first"]
    assert result["second"].state is IterationState.RUNNING


def test_parallel_iterations_are_independent():
    outcomes = {}

    def vu(name, fail_hard):
        with iteration(IterationController(name=name)) as it:
            expect.soft(name).to_be("other")
            if fail_hard:
                expect(1).to_be(2)
        outcomes[name] = it

    threads = [
        threading.Thread(target=vu, args=("vu-1", False)),
        threading.Thread(target=vu, args=("vu-2", True)),
    ]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert outcomes["vu-1"].state is IterationState.COMPLETED
    assert len(outcomes["vu-1"].checks) == 1
    assert outcomes["vu-2"].state is IterationState.ABORTED
    assert len(outcomes["vu-2"].checks) == 1


def test_implicit_controller_accumulates_soft_failures_until_completed():
    result = {}

    def body():
        expect.soft(1).to_be(2)
        expect.soft(3).to_be(4)
        first = current_controller()
        result["checks"] = len(first.checks)
        result["had_soft_failure"] = first.had_soft_failure
        first.complete()
        result["next"] = current_controller()
        result["first"] = first

    thread = threading.Thread(target=body)
    thread.start()
    thread.join()

    assert result["checks"] == 2
    assert result["had_soft_failure"] is True
    assert result["next"] is not result["first"]
    assert result["next"].checks == []
    assert result["next"].had_soft_failure is False
