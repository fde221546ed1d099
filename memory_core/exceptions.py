"""Exception hierarchy for asset loading and deck binding."""
from typing import Optional


class MemoryCoreError(Exception):
    """Base class for all memory_core errors."""


class LoadError(MemoryCoreError):
    """A single named asset could not be loaded."""

    def __init__(self, asset_name: str, message: Optional[str] = None) -> None:
        self.asset_name = asset_name
        super().__init__(message or f"Failed to load asset '{asset_name}'")


class AssetNotFoundError(LoadError):
    """The asset source has no asset under the requested name."""

    def __init__(self, asset_name: str) -> None:
        super().__init__(asset_name, f"Asset '{asset_name}' not found")


class AssetParseError(LoadError):
    """The asset was fetched but its descriptor is malformed."""


class BindError(MemoryCoreError):
    """Deck could not be bound onto the grid slots."""


class CountMismatchError(BindError):
    def __init__(self, slot_count: int, deck_size: int) -> None:
        self.slot_count = slot_count
        self.deck_size = deck_size
        super().__init__(
            f"Cannot bind {deck_size} instances onto {slot_count} slots"
        )


class AlreadyBoundError(BindError):
    def __init__(self, slot_index: int) -> None:
        self.slot_index = slot_index
        super().__init__(f"Slot {slot_index} already has a bound instance")
