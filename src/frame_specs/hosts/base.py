"""Base host interface for the engine collaborator."""

from abc import ABC, abstractmethod
from typing import Any


class BaseHost(ABC):
    """What the harness needs from the frame-driven host application."""

    @abstractmethod
    def free_children(self, node: Any) -> None:
        """Remove and free every child attached under ``node``."""
        pass

    @abstractmethod
    def quit(self, exit_code: int = 0) -> None:
        """Request host process termination."""
        pass
