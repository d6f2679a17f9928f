"""Scheduler and run summary models."""

from dataclasses import dataclass

from frame_specs.constants import EXIT_FAILURE, EXIT_SUCCESS


@dataclass
class SchedulerState:
    """Process-wide scheduling state.

    ``current_test_iteration``, ``wants_replay`` and ``delay_before_next_run``
    are only reset at a test boundary, never between replays of one slot.
    """

    current_test_index: int = 0
    current_test_iteration: int = 0
    wants_replay: bool = False
    delay_before_next_run: float = 0.0

    def reset_slot(self) -> None:
        """Reset per-slot fields at a test boundary."""
        self.current_test_iteration = 0
        self.delay_before_next_run = 0.0
        self.wants_replay = False


@dataclass
class RunSummary:
    """Pass/fail tally for one run."""

    passes: int = 0
    failures: int = 0
    finished: bool = False

    @property
    def exit_code(self) -> int:
        return EXIT_FAILURE if self.failures > 0 else EXIT_SUCCESS

    @property
    def total(self) -> int:
        return self.passes + self.failures

    def format_line(self) -> str:
        if self.failures > 0:
            return f"{self.total} examples, {self.failures} failures"
        return f"{self.passes} examples, 0 failures"
