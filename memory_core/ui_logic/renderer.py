"""
Renderer boundary.

The host application implements this to receive bound instances and flip
animation requests. Hit-testing and tweening stay on the host side.
"""
from abc import ABC, abstractmethod

from ..data_models import AnimationRequest, Slot


class Renderer(ABC):
    """Abstract interface for the scene host."""

    @abstractmethod
    def attach_instance(self, slot: Slot) -> None:
        """Attach ``slot.instance`` into the scene at ``slot.position``."""

    @abstractmethod
    def animate(self, request: AnimationRequest) -> None:
        """Start an orientation tween; must not block until it finishes."""


class NullRenderer(Renderer):
    """Renderer that ignores everything, for headless sessions."""

    def attach_instance(self, slot: Slot) -> None:
        pass

    def animate(self, request: AnimationRequest) -> None:
        pass
