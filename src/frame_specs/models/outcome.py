"""Outcome model for a resolved or replaying test slot."""

from enum import Enum


class Outcome(str, Enum):
    """Result of a single test invocation."""

    PASSED = "passed"
    FAILED = "failed"
    REPLAY = "replay"
