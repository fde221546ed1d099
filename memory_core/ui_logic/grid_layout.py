"""
Grid mathematics for the card board.

Calculate slot positions on the shared base plane and the board footprint.
No UI framework dependencies - the host anchors the generated slots into
its own scene graph.
"""
from dataclasses import dataclass
from typing import List, Tuple

from ..data_models import Slot, Vector3


@dataclass(slots=True)
class GridDimensions:
    """Grid layout dimensions, in scene units (metres)."""
    rows: int = 4
    columns: int = 4
    spacing: float = 0.1
    card_width: float = 0.04
    card_height: float = 0.002
    card_depth: float = 0.04

    @property
    def slot_count(self) -> int:
        return self.rows * self.columns

    @property
    def footprint(self) -> Tuple[float, float]:
        """Width and depth covered by the cards, edge to edge."""
        if self.slot_count == 0:
            return (0.0, 0.0)
        width = (self.columns - 1) * self.spacing + self.card_width
        depth = (self.rows - 1) * self.spacing + self.card_depth
        return (width, depth)


@dataclass(slots=True)
class GridPosition:
    """Position of a slot in the grid."""
    row: int
    column: int
    x: float
    z: float
    index: int

    @property
    def point(self) -> Vector3:
        return (self.x, 0.0, self.z)

    def __str__(self) -> str:
        return f"GridPosition(row={self.row}, col={self.column}, x={self.x}, z={self.z}, idx={self.index})"


def generate_slots(rows: int, columns: int, spacing: float) -> List[Slot]:
    """
    Generate ``rows * columns`` hidden, unbound slots in row-major order.

    Args:
        rows: Number of grid rows
        columns: Number of grid columns
        spacing: Distance between neighbouring slot centres

    Returns:
        List of Slot objects, slot i at ``(col * spacing, 0, row * spacing)``;
        empty when either dimension is zero
    """
    return GridLayout(GridDimensions(rows=rows, columns=columns, spacing=spacing)).generate()


class GridLayout:
    """
    Manages grid layout calculations for the card board.

    Slot positions are a pure function of the dimensions; nothing here
    depends on asset loading.
    """

    def __init__(self, dimensions: GridDimensions) -> None:
        """
        Initialize grid layout with specified dimensions.

        Args:
            dimensions: Grid dimensions and spacing configuration
        """
        if dimensions.rows < 0 or dimensions.columns < 0:
            raise ValueError("Grid rows and columns must not be negative")
        if dimensions.spacing < 0:
            raise ValueError("Grid spacing must not be negative")
        self.dimensions = dimensions

    def get_position(self, index: int) -> GridPosition:
        """
        Calculate grid position for slot at given index.

        Args:
            index: Zero-based slot index

        Returns:
            GridPosition with row, column, and plane coordinates
        """
        row = index // self.dimensions.columns
        column = index % self.dimensions.columns

        return GridPosition(
            row=row,
            column=column,
            x=column * self.dimensions.spacing,
            z=row * self.dimensions.spacing,
            index=index,
        )

    def get_positions_batch(self, start_index: int, count: int) -> List[GridPosition]:
        return [self.get_position(start_index + i) for i in range(count)]

    def generate(self) -> List[Slot]:
        """Create one slot per grid cell, all hidden and unbound."""
        return [
            Slot(index=pos.index, row=pos.row, column=pos.column, position=pos.point)
            for pos in self.get_positions_batch(0, self.dimensions.slot_count)
        ]

    def fits_within(self, min_width: float, min_depth: float) -> bool:
        """
        Check whether the board fits inside a detected surface.

        Args:
            min_width: Width of the surface the host anchored to
            min_depth: Depth of the surface the host anchored to

        Returns:
            True if the card footprint does not exceed the surface
        """
        width, depth = self.dimensions.footprint
        return width <= min_width and depth <= min_depth
