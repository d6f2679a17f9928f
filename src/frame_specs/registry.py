"""Ordered registry of test routines with an optional focus override."""

import logging
from typing import Any, Callable, List, Optional

logger = logging.getLogger(__name__)

TestRoutine = Callable[[Any], None]


def routine_name(routine: TestRoutine) -> str:
    """Best-effort display name for a routine, used in diagnostics only."""
    return getattr(routine, "__qualname__", None) or repr(routine)


class TestRegistry:
    """Append-only sequence of routines; insertion order is execution order."""

    __test__ = False

    def __init__(self) -> None:
        self._routines: List[TestRoutine] = []
        self._focused: Optional[TestRoutine] = None

    def register(self, routine: TestRoutine) -> TestRoutine:
        """Append a routine. Duplicates run once per occurrence."""
        if not callable(routine):
            raise TypeError(f"Test routine must be callable, got {type(routine).__name__}")
        self._routines.append(routine)
        logger.debug(f"Registered test #{len(self._routines) - 1}: {routine_name(routine)}")
        return routine

    def focus(self, routine: TestRoutine) -> TestRoutine:
        """Set the single focus override, replacing any earlier one."""
        if not callable(routine):
            raise TypeError(f"Test routine must be callable, got {type(routine).__name__}")
        if self._focused is not None and self._focused is not routine:
            logger.debug(
                f"Focus override {routine_name(self._focused)} replaced by {routine_name(routine)}"
            )
        self._focused = routine
        return routine

    def clear_focus(self) -> None:
        self._focused = None

    @property
    def focused(self) -> Optional[TestRoutine]:
        return self._focused

    def lookup(self, index: int) -> Optional[TestRoutine]:
        """Return the routine at ``index`` or None once the run is exhausted."""
        if 0 <= index < len(self._routines):
            return self._routines[index]
        return None

    def __len__(self) -> int:
        return len(self._routines)
