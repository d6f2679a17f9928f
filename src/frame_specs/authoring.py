"""Functions available to test bodies.

A test that needs to wait for an engine effect calls ``wait`` (or
``request_replay``), which ends the current invocation. The scheduler then
calls the same routine again from the top once the delay has elapsed, and the
routine uses ``tick()`` to pick up where it left off::

    @test
    def falls_under_gravity(root):
        if tick() == 0:
            root.add_child(Node("ball"))
            wait(500)
        assert_approx_eq(ball_height(root), 0.0, 0.01)
"""

import math
from typing import Optional

from frame_specs import context as _context
from frame_specs.context import SpecContext, spec_context
from frame_specs.registry import TestRoutine


class ReplayRequested(BaseException):
    """Raised by ``request_replay`` to end the current invocation.

    Derives from BaseException so an ``except Exception`` in a test body does
    not swallow it.
    """

    def __init__(self, delay_seconds: float) -> None:
        super().__init__(delay_seconds)
        self.delay_seconds = delay_seconds


def test(routine: TestRoutine, context: Optional[SpecContext] = None) -> TestRoutine:
    """Register ``routine`` to run in registration order."""
    return (context or spec_context).registry.register(routine)


test.__test__ = False


def _running(context: Optional[SpecContext]) -> SpecContext:
    """Explicit context, else the one the scheduler is running, else the default."""
    return context or _context.active_context() or spec_context


def focus(routine: TestRoutine, context: Optional[SpecContext] = None) -> TestRoutine:
    """Run only ``routine`` and quit after its slot resolves."""
    return (context or spec_context).registry.focus(routine)


def current_iteration(context: Optional[SpecContext] = None) -> int:
    """Number of replays the running test slot has completed."""
    return _running(context).state.current_test_iteration


tick = current_iteration


def request_replay(delay_seconds: float, context: Optional[SpecContext] = None) -> None:
    """Re-run the current test from the top after ``delay_seconds``.

    Never returns: raises ReplayRequested so nothing after the call runs.
    """
    delay_seconds = float(delay_seconds)
    if not math.isfinite(delay_seconds) or delay_seconds < 0:
        raise ValueError(f"Replay delay must be finite and non-negative, got {delay_seconds}")

    state = _running(context).state
    state.wants_replay = True
    state.delay_before_next_run = delay_seconds
    raise ReplayRequested(delay_seconds)


def wait(millis: float, context: Optional[SpecContext] = None) -> None:
    """Millisecond form of ``request_replay``."""
    request_replay(float(millis) / 1000.0, context=context)


def assert_approx_eq(a: float, b: float, epsilon: float) -> None:
    """Fail the test if ``abs(a - b) > epsilon``."""
    if abs(a - b) > epsilon:
        raise AssertionError(
            f"assertion failed: abs(a - b) <= {epsilon}. Values: {a} and {b}"
        )
