"""Binding of a shuffled deck onto grid slots."""
import logging
from typing import Sequence

from .data_models import PlaceableInstance, Slot
from .exceptions import AlreadyBoundError, BindError, CountMismatchError

logger = logging.getLogger(__name__)


class Binder:
    """Assigns deck[i] to slots[i], all or nothing."""

    def bind(self, slots: Sequence[Slot], deck: Sequence[PlaceableInstance]) -> None:
        """
        Attach every instance to the slot at the same index, face down.

        Args:
            slots: Grid slots in index order
            deck: Shuffled instances, one per slot

        Raises:
            CountMismatchError: If the deck size differs from the slot count
            AlreadyBoundError: If any slot already owns an instance
            BindError: If the same instance appears twice in the deck
        """
        if len(slots) != len(deck):
            logger.error("Deck size %d does not match slot count %d", len(deck), len(slots))
            raise CountMismatchError(slot_count=len(slots), deck_size=len(deck))

        for slot in slots:
            if slot.is_bound:
                raise AlreadyBoundError(slot.index)

        if len({id(instance) for instance in deck}) != len(deck):
            raise BindError("Deck contains the same instance more than once")

        for slot, instance in zip(slots, deck):
            slot.attach(instance)

        logger.info("Bound %d instances onto slots", len(deck))
