"""Process-wide harness context."""

from contextlib import contextmanager
from typing import Iterator, Optional

from frame_specs.models.scheduler import SchedulerState
from frame_specs.registry import TestRegistry


class SpecContext:
    """Bundle of the registry and scheduler state shared by one run.

    The module-level ``spec_context`` is the instance test modules register
    into. Runners and authoring helpers accept another instance by reference.
    """

    def __init__(self) -> None:
        self.registry = TestRegistry()
        self.state = SchedulerState()


spec_context = SpecContext()

# Context of the test body currently being invoked, if any
_active_context: Optional[SpecContext] = None


def active_context() -> Optional[SpecContext]:
    return _active_context


@contextmanager
def activate(context: SpecContext) -> Iterator[SpecContext]:
    """Make ``context`` the one authoring helpers act on inside a test body."""
    global _active_context
    previous = _active_context
    _active_context = context
    try:
        yield context
    finally:
        _active_context = previous
