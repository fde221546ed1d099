"""
Flip state management for card slots.

Toggle a slot between hidden and shown on selection, issue the matching
orientation animation to the renderer and notify listeners. No UI framework
dependencies - selections arrive as already hit-tested slot indices.
"""
import logging
from dataclasses import dataclass
from typing import Callable, List, Sequence

from ..data_models import AnimationRequest, Easing, FlipState, Orientation, Slot
from .renderer import Renderer

logger = logging.getLogger(__name__)

DEFAULT_FLIP_DURATION_MS = 250


@dataclass
class FlipEvent:
    """Represents a completed flip state change."""
    slot_index: int
    previous_state: FlipState
    new_state: FlipState
    request: AnimationRequest

    def __str__(self) -> str:
        return f"FlipEvent(slot={self.slot_index}, {self.previous_state.value}->{self.new_state.value})"


# Type alias for flip event callbacks
FlipCallback = Callable[[FlipEvent], None]


class FlipController:
    """
    Per-slot Hidden/Shown state machine.

    Every accepted selection toggles exactly one slot and issues one
    fire-and-forget animation request. A new selection during a running
    animation is accepted immediately; the latest target wins.
    """

    def __init__(
        self,
        slots: Sequence[Slot],
        renderer: Renderer,
        *,
        duration_ms: int = DEFAULT_FLIP_DURATION_MS,
        easing: Easing = Easing.EASE_IN_OUT,
    ) -> None:
        """
        Initialize flip controller.

        Args:
            slots: Slots owned by the session, indexed by slot index
            renderer: Receiver of animation requests
            duration_ms: Flip animation duration
            easing: Flip animation timing curve
        """
        self._slots = slots
        self.renderer = renderer
        self.duration_ms = duration_ms
        self.easing = easing
        self._callbacks: List[FlipCallback] = []

    def register_callback(self, callback: FlipCallback) -> None:
        """
        Register callback for flip events.

        Args:
            callback: Function to call after each accepted flip
        """
        if callback not in self._callbacks:
            self._callbacks.append(callback)

    def unregister_callback(self, callback: FlipCallback) -> None:
        if callback in self._callbacks:
            self._callbacks.remove(callback)

    def select(self, slot_index: int) -> bool:
        """
        Handle a selection of the slot at ``slot_index``.

        Args:
            slot_index: Index resolved by the host's hit-testing

        Returns:
            True if the slot flipped, False if the selection was ignored
        """
        if not 0 <= slot_index < len(self._slots):
            logger.debug("Ignoring selection of slot %s: out of range", slot_index)
            return False

        slot = self._slots[slot_index]
        if not slot.is_bound:
            logger.debug("Ignoring selection of slot %d: no bound instance", slot_index)
            return False

        previous = slot.flip_state
        slot.flip_state = previous.toggled
        slot.orientation = Orientation.for_state(slot.flip_state)

        request = AnimationRequest(
            slot_index=slot_index,
            target_orientation=slot.orientation,
            duration_ms=self.duration_ms,
            easing=self.easing,
        )
        try:
            self.renderer.animate(request)
        except Exception as e:
            # The flip stands even if the renderer could not start the tween
            logger.error("Animation request error for slot %d: %s", slot_index, e)
        logger.debug("Slot %d flipped %s -> %s", slot_index, previous.value, slot.flip_state.value)

        self._notify_flip(FlipEvent(
            slot_index=slot_index,
            previous_state=previous,
            new_state=slot.flip_state,
            request=request,
        ))
        return True

    def animation_completed(self, slot_index: int) -> None:
        """Acknowledge that the renderer finished a flip tween."""
        logger.debug("Flip animation completed for slot %s", slot_index)

    def get_state(self, slot_index: int) -> FlipState:
        return self._slots[slot_index].flip_state

    def get_shown_indices(self) -> List[int]:
        return [slot.index for slot in self._slots if slot.flip_state is FlipState.SHOWN]

    def _notify_flip(self, event: FlipEvent) -> None:
        for callback in list(self._callbacks):
            try:
                callback(event)
            except Exception as e:
                # Log error but don't let callback failures break flipping
                logger.error("Flip callback error: %s", e)

    def get_state_summary(self) -> dict[str, int | list[int]]:
        """
        Get summary of current flip state for debugging.

        Returns:
            Dictionary with flip state information
        """
        return {
            'slot_count': len(self._slots),
            'bound_count': sum(1 for slot in self._slots if slot.is_bound),
            'shown': self.get_shown_indices(),
            'callback_count': len(self._callbacks),
        }
