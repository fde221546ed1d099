"""
Core package for the memory-matching game.

Asset loading, deck assembly and per-card flip state. No rendering or UI
framework dependencies - a host application supplies the renderer.
"""
from .data_models import (
    AnimationRequest,
    CollisionShape,
    Easing,
    FlipState,
    MeshBounds,
    Orientation,
    PlaceableInstance,
    Slot,
    Template,
    Transform,
)
from .exceptions import (
    AlreadyBoundError,
    AssetNotFoundError,
    AssetParseError,
    BindError,
    CountMismatchError,
    LoadError,
    MemoryCoreError,
)
from .game_session import GameSession, SessionState

__all__ = [
    'AnimationRequest',
    'CollisionShape',
    'Easing',
    'FlipState',
    'MeshBounds',
    'Orientation',
    'PlaceableInstance',
    'Slot',
    'Template',
    'Transform',
    'AlreadyBoundError',
    'AssetNotFoundError',
    'AssetParseError',
    'BindError',
    'CountMismatchError',
    'LoadError',
    'MemoryCoreError',
    'GameSession',
    'SessionState',
]
