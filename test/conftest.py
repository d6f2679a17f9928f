"""Shared fixtures for frame_specs tests."""

import pytest

from frame_specs import authoring, runner
from frame_specs.context import SpecContext
from frame_specs.hosts.headless import HeadlessHost, Node
from frame_specs.runner import TestRunner
from frame_specs.services import failure_service
from frame_specs.utils import output


@pytest.fixture(autouse=True)
def reset_process_state(monkeypatch):
    # The failure hook and color setting are process-wide
    monkeypatch.setattr(failure_service, "_installed_hook", None)
    monkeypatch.setattr(output, "_color", None)


@pytest.fixture
def context(monkeypatch):
    """Fresh context that also backs the module-level authoring helpers."""
    ctx = SpecContext()
    monkeypatch.setattr(authoring, "spec_context", ctx)
    monkeypatch.setattr(runner, "spec_context", ctx)
    return ctx


@pytest.fixture
def host():
    return HeadlessHost(frame_delta=0.25, max_frames=1000)


@pytest.fixture
def drive(context, host):
    """Run the context's tests to completion and return the runner."""

    def _drive():
        root = host.root.add_child(Node("TestRunner"))
        test_runner = TestRunner(host, root, context)
        test_runner.on_start()
        host.run(test_runner.on_frame)
        return test_runner

    return _drive
