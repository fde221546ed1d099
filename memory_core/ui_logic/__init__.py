"""
UI logic package - portable across hosts.

Grid layout calculations, flip state management and the renderer boundary.
No UI framework dependencies.
"""
from .grid_layout import GridLayout, GridDimensions, GridPosition, generate_slots
from .flip_controller import FlipController, FlipEvent
from .renderer import Renderer, NullRenderer

__all__ = [
    'GridLayout',
    'GridDimensions',
    'GridPosition',
    'generate_slots',
    'FlipController',
    'FlipEvent',
    'Renderer',
    'NullRenderer',
]
