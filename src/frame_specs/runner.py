"""Host-attached test runner."""

import logging
from typing import Any, Optional

import click

from frame_specs.context import SpecContext, spec_context
from frame_specs.hosts.base import BaseHost
from frame_specs.hosts.headless import HeadlessHost, Node
from frame_specs.models.outcome import Outcome
from frame_specs.models.scheduler import RunSummary
from frame_specs.services import scheduler_service
from frame_specs.services.failure_service import install_failure_hook

logger = logging.getLogger(__name__)


class TestRunner:
    """Object the host calls once on start and once per frame.

    ``root`` is the node handed to every test; its children are freed between
    test slots.
    """

    __test__ = False

    def __init__(self, host: BaseHost, root: Any, context: Optional[SpecContext] = None):
        self.host = host
        self.root = root
        self.context = context or spec_context
        self.summary = RunSummary()
        self.time_counter = 0.0

    @property
    def finished(self) -> bool:
        return self.summary.finished

    def on_start(self) -> None:
        """Install the failure hook. Called once when attached to the host."""
        click.echo("")
        install_failure_hook()
        logger.info(f"Test runner started with {len(self.context.registry)} registered tests")

    def on_frame(self, elapsed: float) -> Optional[Outcome]:
        """Accumulate frame time and advance once the pending delay has passed."""
        if self.summary.finished:
            return None

        self.time_counter += elapsed
        if self.time_counter > self.context.state.delay_before_next_run:
            self.time_counter = 0.0
            return scheduler_service.advance(self.context, self.summary, self.host, self.root)
        return None


def run_headless(host: HeadlessHost, context: Optional[SpecContext] = None) -> int:
    """Attach a runner under the host root and run frames until it quits."""
    root = host.root.add_child(Node("TestRunner"))
    runner = TestRunner(host, root, context)
    runner.on_start()
    return host.run(runner.on_frame)
