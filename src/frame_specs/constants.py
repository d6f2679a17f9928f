"""Constants for the frame_specs test harness.

This module defines the configuration constants used throughout frame_specs,
including headless frame loop settings, console styling and logging defaults.

frame_specs runs registered test routines inside a frame-driven host, one
invocation per satisfied frame window, and quits the host when the queue is
exhausted.
"""

import os


def _get_float_env(name: str, default: float) -> float:
    """Parse float env var with safe fallback."""
    try:
        return float(os.getenv(name, str(default)))
    except (TypeError, ValueError):
        return default


def _get_int_env(name: str, default: int) -> int:
    """Parse int env var with safe fallback."""
    try:
        return int(os.getenv(name, str(default)))
    except (TypeError, ValueError):
        return default


def _is_truthy_env(name: str) -> bool:
    """Parse boolean env var using common truthy values."""
    return os.getenv(name, "").strip().lower() in {"1", "true", "yes", "on"}


# =============================================================================
# Headless Host Configuration
# =============================================================================
# Simulated seconds elapsed per headless frame (60 fps)
FRAME_DELTA = _get_float_env("FRAME_SPECS_FRAME_DELTA", 1.0 / 60.0)

# Hard cap on headless frames; 0 means unlimited
# A test that always requests a replay never finishes, so CI runs should set this
MAX_FRAMES = _get_int_env("FRAME_SPECS_MAX_FRAMES", 0)

# Sleep for FRAME_DELTA between headless frames instead of simulating time
REALTIME = _is_truthy_env("FRAME_SPECS_REALTIME")

# =============================================================================
# Console Output
# =============================================================================
NO_COLOR = _is_truthy_env("FRAME_SPECS_NO_COLOR")

PASS_MARKER = "."
FAIL_MARKER = "F"

PASS_COLOR = "green"
FAIL_COLOR = "red"
TRACE_COLOR = "blue"

# =============================================================================
# Logging
# =============================================================================
LOG_LEVEL = os.getenv("FRAME_SPECS_LOG_LEVEL", "WARNING").upper()

# =============================================================================
# Exit Codes
# =============================================================================
EXIT_SUCCESS = 0
EXIT_FAILURE = 1
