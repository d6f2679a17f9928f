"""Headless host: an in-process frame loop and scene tree.

Stands in for the engine when the harness runs from the command line or in
unit tests. Frames are simulated by default; ``realtime`` sleeps for the frame
delta between ticks.
"""

import logging
import time
from typing import Callable, List, Optional

from frame_specs.constants import FRAME_DELTA, MAX_FRAMES, REALTIME
from frame_specs.hosts.base import BaseHost

logger = logging.getLogger(__name__)


class Node:
    """Minimal scene-graph node."""

    def __init__(self, name: str = "Node") -> None:
        self.name = name
        self.parent: Optional["Node"] = None
        self._children: List["Node"] = []
        self.freed = False

    def add_child(self, child: "Node") -> "Node":
        if child.freed:
            raise ValueError(f"Cannot attach freed node '{child.name}'")
        if child.parent is not None:
            raise ValueError(f"Node '{child.name}' already has parent '{child.parent.name}'")
        child.parent = self
        self._children.append(child)
        return child

    def remove_child(self, child: "Node") -> None:
        if child.parent is not self:
            raise ValueError(f"Node '{child.name}' is not a child of '{self.name}'")
        self._children.remove(child)
        child.parent = None

    def get_children(self) -> List["Node"]:
        return list(self._children)

    def get_child_count(self) -> int:
        return len(self._children)

    def find_child(self, name: str) -> Optional["Node"]:
        for child in self._children:
            if child.name == name:
                return child
        return None

    def free(self) -> None:
        """Detach from parent and free this node and its subtree."""
        for child in self.get_children():
            child.free()
        if self.parent is not None:
            self.parent.remove_child(self)
        self.freed = True

    def __repr__(self) -> str:
        return f"Node({self.name!r}, children={len(self._children)})"


FrameCallback = Callable[[float], None]


class HeadlessHost(BaseHost):
    """Drives a frame callback until quit is requested."""

    def __init__(
        self,
        frame_delta: float = FRAME_DELTA,
        max_frames: int = MAX_FRAMES,
        realtime: bool = REALTIME,
    ) -> None:
        if frame_delta <= 0:
            raise ValueError(f"frame_delta must be positive, got {frame_delta}")
        self.frame_delta = frame_delta
        self.max_frames = max_frames
        self.realtime = realtime
        self.root = Node("root")
        self.frame_count = 0
        self.quit_requested = False
        self.exit_code: Optional[int] = None

    def free_children(self, node: Node) -> None:
        children = node.get_children()
        for child in children:
            child.free()
        if children:
            logger.debug(f"Freed {len(children)} children of '{node.name}'")

    def quit(self, exit_code: int = 0) -> None:
        logger.info(f"Host quit requested with exit code {exit_code}")
        self.quit_requested = True
        self.exit_code = exit_code

    def run(self, on_frame: FrameCallback) -> int:
        """Call ``on_frame`` once per frame until quit; return the exit code.

        Raises:
            RuntimeError: If ``max_frames`` is reached before quit
        """
        while not self.quit_requested:
            if self.max_frames and self.frame_count >= self.max_frames:
                logger.warning(f"Frame cap of {self.max_frames} reached before quit")
                raise RuntimeError(
                    f"Host did not quit within {self.max_frames} frames "
                    f"(a test may be requesting replays forever)"
                )
            if self.realtime:
                time.sleep(self.frame_delta)
            self.frame_count += 1
            on_frame(self.frame_delta)

        return self.exit_code if self.exit_code is not None else 0
