"""frame_specs: run test routines one per frame inside a frame-driven host."""

from frame_specs.authoring import (
    ReplayRequested,
    assert_approx_eq,
    current_iteration,
    focus,
    request_replay,
    test,
    tick,
    wait,
)
from frame_specs.context import SpecContext, spec_context
from frame_specs.hosts.base import BaseHost
from frame_specs.hosts.headless import HeadlessHost, Node
from frame_specs.runner import TestRunner, run_headless

__all__ = [
    "BaseHost",
    "HeadlessHost",
    "Node",
    "ReplayRequested",
    "SpecContext",
    "TestRunner",
    "assert_approx_eq",
    "current_iteration",
    "focus",
    "request_replay",
    "run_headless",
    "spec_context",
    "test",
    "tick",
    "wait",
]
