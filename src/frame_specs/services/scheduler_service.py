"""Scheduler: selects, invokes and resolves test slots.

A test cannot suspend inside a frame callback, so waiting is modeled as an
early return followed by a fresh invocation of the same routine. The routine
reads ``current_test_iteration`` to know how far it got. The iteration counter
only resets when the slot resolves (pass or fail), at which point the next
slot starts from a clean state and an empty root node.
"""

import logging
from typing import Any, Optional, Tuple

from frame_specs.constants import FAIL_MARKER, PASS_MARKER
from frame_specs.context import SpecContext, activate
from frame_specs.hosts.base import BaseHost
from frame_specs.models.outcome import Outcome
from frame_specs.models.scheduler import RunSummary
from frame_specs.registry import TestRoutine, routine_name
from frame_specs.services.failure_service import invoke_test
from frame_specs.utils.output import print_green, print_red, println_green, println_red

logger = logging.getLogger(__name__)


def select_routine(context: SpecContext) -> Tuple[Optional[TestRoutine], bool]:
    """Return the active routine and whether it is the focus override."""
    focused = context.registry.focused
    if focused is not None:
        return focused, True
    return context.registry.lookup(context.state.current_test_index), False


def slot_label(context: SpecContext, routine: TestRoutine, focused: bool) -> str:
    if focused:
        return f"focused test {routine_name(routine)}"
    return f"test #{context.state.current_test_index} {routine_name(routine)}"


def cleanup(context: SpecContext, host: BaseHost, root: Any) -> None:
    """Reset per-slot state and free everything the test attached to root."""
    context.state.reset_slot()
    context.registry.clear_focus()
    host.free_children(root)


def finish_run(summary: RunSummary, host: BaseHost) -> None:
    """Print the tally and ask the host to quit. Runs at most once."""
    if summary.finished:
        return
    summary.finished = True

    if summary.failures > 0:
        println_red(f"\n\n{summary.format_line()}")
    else:
        println_green(f"\n\n{summary.format_line()}")

    logger.info(f"Run finished: {summary.format_line()}, exit code {summary.exit_code}")
    host.quit(summary.exit_code)


def advance(
    context: SpecContext, summary: RunSummary, host: BaseHost, root: Any
) -> Optional[Outcome]:
    """Run one invocation of the active test slot.

    Returns the outcome, or None when the registry is exhausted and the run
    has been finished.
    """
    if summary.finished:
        return None

    routine, focused = select_routine(context)
    if routine is None:
        logger.info("No more registered tests")
        finish_run(summary, host)
        return None

    state = context.state
    label = slot_label(context, routine, focused)
    logger.debug(f"Invoking {label} (iteration {state.current_test_iteration})")

    # Authoring helpers called without a context act on this run's state
    with activate(context):
        completed = invoke_test(routine, root, label)

    if completed:
        if state.wants_replay:
            state.wants_replay = False
            state.current_test_iteration += 1
            logger.debug(
                f"{label} requested replay in {state.delay_before_next_run:.3f}s "
                f"(next iteration {state.current_test_iteration})"
            )
            return Outcome.REPLAY

        summary.passes += 1
        print_green(PASS_MARKER)
        outcome = Outcome.PASSED
    else:
        summary.failures += 1
        print_red(FAIL_MARKER)
        outcome = Outcome.FAILED

    state.current_test_index += 1
    cleanup(context, host, root)
    logger.debug(f"{label} resolved: {outcome.value}")

    if focused:
        finish_run(summary, host)

    return outcome
