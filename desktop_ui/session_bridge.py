"""
Async/Qt bridge for the desktop host.

Runs a GameSession on a private asyncio loop thread and re-emits renderer
calls and session completion as Qt signals. Selections coming from the Qt
side are marshalled onto the loop thread so all session state is mutated
from a single thread.
"""
import asyncio
import logging
import threading
from typing import Optional

from PySide6.QtCore import QObject, Signal, Slot

from memory_config.base import BaseConfiguration
from memory_core.asset_source import AssetSource
from memory_core.data_models import AnimationRequest, Slot as CardSlot
from memory_core.game_session import GameSession
from memory_core.ui_logic.renderer import Renderer

logger = logging.getLogger(__name__)


class RendererSignals(QObject):
    """Qt signals carrying renderer requests to the scene."""

    instanceAttached = Signal(int, str)  # slot_index, template_name
    animationRequested = Signal(int, float, int, str)  # slot_index, angle, duration_ms, easing


class QtRenderer(Renderer):
    """Renderer that forwards every request as a Qt signal."""

    def __init__(self) -> None:
        self.signals = RendererSignals()

    def attach_instance(self, slot: CardSlot) -> None:
        if slot.instance is None:
            return
        self.signals.instanceAttached.emit(slot.index, slot.instance.template_name)

    def animate(self, request: AnimationRequest) -> None:
        self.signals.animationRequested.emit(
            request.slot_index,
            request.target_orientation.angle,
            request.duration_ms,
            request.easing.value,
        )


class SessionBridge(QObject):
    """
    Coordinates between the async game session and Qt.

    Owns the event loop thread, starts deck assembly and exposes taps as a
    Qt slot.
    """

    deckReady = Signal()
    deckFailed = Signal(str, str)  # error_type, message
    slotFlipped = Signal(int, str)  # slot_index, new flip state

    def __init__(
        self,
        config: BaseConfiguration,
        *,
        renderer: Optional[QtRenderer] = None,
        source: Optional[AssetSource] = None,
    ) -> None:
        super().__init__()
        self.renderer = renderer or QtRenderer()
        self.session = GameSession.from_config(config, self.renderer, source)

        self._loop = asyncio.new_event_loop()
        self._loop_thread = threading.Thread(target=self._loop.run_forever, daemon=True)
        self._loop_thread.start()
        logger.info("Session bridge created")

    def start(self) -> None:
        """Start deck assembly on the loop thread."""
        future = asyncio.run_coroutine_threadsafe(self._start(), self._loop)
        future.result()

    async def _start(self) -> None:
        self.session.add_completion_listener(self._on_session_complete)
        self.session.start()

    @Slot(int)
    def selectSlot(self, slot_index: int) -> None:
        self._loop.call_soon_threadsafe(self._select, slot_index)

    @Slot(int)
    def animationFinished(self, slot_index: int) -> None:
        controller = self.session.flip_controller
        if controller is not None:
            self._loop.call_soon_threadsafe(controller.animation_completed, slot_index)

    def _select(self, slot_index: int) -> None:
        if self.session.select(slot_index):
            state = self.session.slots[slot_index].flip_state
            self.slotFlipped.emit(slot_index, state.value)

    def _on_session_complete(self, error: Optional[BaseException]) -> None:
        if error is None:
            self.deckReady.emit()
        else:
            self.deckFailed.emit(type(error).__name__, str(error))

    def cleanup(self) -> None:
        """Stop the session and the loop thread."""
        logger.info("Cleaning up session bridge")
        if self._loop.is_running():
            future = asyncio.run_coroutine_threadsafe(self.session.stop(), self._loop)
            future.result(timeout=5)
            self._loop.call_soon_threadsafe(self._loop.stop)
        self._loop_thread.join(timeout=5)
        self._loop.close()
        self.session.close()
        logger.info("Session bridge cleanup complete")
