"""Failure isolation boundary and the process-wide failure hook."""

import logging
import re
import traceback
from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional

from frame_specs.authoring import ReplayRequested
from frame_specs.registry import TestRoutine
from frame_specs.utils.output import println_blue, println_red

logger = logging.getLogger(__name__)

# Dispatch frames that sit between the frame driver and the test body
HARNESS_FRAME_PATTERN = re.compile(
    r"[\\/]frame_specs[\\/]services[\\/]\w+\.py\", line \d+, in (?:invoke_test|advance)\n"
)
# Frames inside the helpers that raise on behalf of a test
SIGNAL_FRAME_PATTERN = re.compile(
    r"[\\/]frame_specs[\\/]authoring\.py\", line \d+, in (?:assert_approx_eq|request_replay|wait)\n"
)
TRACE_FILTER_PATTERNS = [HARNESS_FRAME_PATTERN, SIGNAL_FRAME_PATTERN]


@dataclass
class FailureReport:
    """What the failure hook receives for one failed invocation."""

    label: str
    exception: BaseException
    trace: List[str] = field(default_factory=list)

    @property
    def message(self) -> str:
        return f"{self.label} failed: {type(self.exception).__name__}: {self.exception}"


FailureHook = Callable[[FailureReport], None]

_installed_hook: Optional[FailureHook] = None


def filter_trace(entries: List[str]) -> List[str]:
    """Drop harness and assertion-helper frames from formatted trace entries.

    Entries that match no pattern are kept as-is. If filtering would leave
    nothing, the trace is returned unfiltered.
    """
    kept = [
        entry
        for entry in entries
        if not any(pattern.search(entry) for pattern in TRACE_FILTER_PATTERNS)
    ]
    return kept or list(entries)


def capture_trace(exc: BaseException) -> List[str]:
    """Format the traceback of ``exc`` one entry per frame, filtered."""
    entries = traceback.format_list(traceback.extract_tb(exc.__traceback__))
    return filter_trace(entries)


def print_failure_report(report: FailureReport) -> None:
    """Default hook: red message then blue trace."""
    println_red(report.message)
    if report.trace:
        println_blue("Traceback (most recent call last):\n" + "".join(report.trace).rstrip("\n"))


def install_failure_hook(hook: FailureHook = print_failure_report) -> bool:
    """Install the failure hook once per process.

    Returns False and leaves the existing hook in place on later calls.
    """
    global _installed_hook
    if _installed_hook is not None:
        logger.debug("Failure hook already installed, ignoring re-installation")
        return False
    _installed_hook = hook
    logger.debug(f"Installed failure hook {getattr(hook, '__name__', hook)!r}")
    return True


def get_failure_hook() -> Optional[FailureHook]:
    return _installed_hook


def report_failure(label: str, exc: BaseException) -> FailureReport:
    """Build a report for ``exc`` and pass it to the installed hook."""
    report = FailureReport(label=label, exception=exc, trace=capture_trace(exc))
    if _installed_hook is None:
        logger.error(report.message)
        return report

    try:
        _installed_hook(report)
    except Exception as e:
        logger.error(f"Failure hook raised while reporting {label}: {e}")
    return report


def invoke_test(routine: TestRoutine, root: Any, label: str) -> bool:
    """Call ``routine(root)``; return False if it raised.

    ReplayRequested counts as a normal return. KeyboardInterrupt and
    SystemExit propagate; any other BaseException is a test failure.
    """
    try:
        routine(root)
    except ReplayRequested:
        return True
    except (KeyboardInterrupt, SystemExit):
        raise
    except BaseException as e:
        report_failure(label, e)
        return False
    return True
