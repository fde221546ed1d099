"""Core data structures for the memory game.

Contains the loaded templates, their placeable copies and the grid slots
that own them. Shared by the loading pipeline, the binder and any host UI.
"""
import copy
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

Vector3 = Tuple[float, float, float]

# Rotation axis used for every card flip
FLIP_AXIS: Vector3 = (1.0, 0.0, 0.0)


class FlipState(Enum):
    HIDDEN = "hidden"
    SHOWN = "shown"

    @property
    def toggled(self) -> "FlipState":
        return FlipState.SHOWN if self is FlipState.HIDDEN else FlipState.HIDDEN


class Orientation(Enum):
    """Card rotation about ``FLIP_AXIS``, in radians."""

    FACE_UP = 0.0
    FACE_DOWN = math.pi

    @property
    def angle(self) -> float:
        return self.value

    @classmethod
    def for_state(cls, state: FlipState) -> "Orientation":
        return cls.FACE_UP if state is FlipState.SHOWN else cls.FACE_DOWN


class Easing(Enum):
    LINEAR = "linear"
    EASE_IN = "ease_in"
    EASE_OUT = "ease_out"
    EASE_IN_OUT = "ease_in_out"


@dataclass(frozen=True, slots=True)
class MeshBounds:
    """Axis-aligned extent of a model's mesh, in model units."""
    width: float
    height: float
    depth: float

    def scaled(self, scale: Vector3) -> "MeshBounds":
        return MeshBounds(
            width=self.width * scale[0],
            height=self.height * scale[1],
            depth=self.depth * scale[2],
        )


@dataclass(frozen=True, slots=True)
class CollisionShape:
    """Box collision geometry used by the host for hit-testing."""
    extents: MeshBounds
    center: Vector3 = (0.0, 0.0, 0.0)


@dataclass(slots=True)
class Transform:
    scale: Vector3 = (1.0, 1.0, 1.0)
    rotation: float = 0.0
    translation: Vector3 = (0.0, 0.0, 0.0)


@dataclass(frozen=True)
class Template:
    """An immutable loaded visual asset, used as a stamp for instances."""
    name: str
    bounds: MeshBounds
    materials: Tuple[str, ...] = ()
    metadata: Dict[str, Any] = field(default_factory=dict, hash=False)

    def clone(self, instance_id: str) -> "PlaceableInstance":
        """
        Create an independent placeable copy of this template.

        Args:
            instance_id: Identifier unique within the deck

        Returns:
            PlaceableInstance sharing no mutable state with the template
        """
        return PlaceableInstance(
            instance_id=instance_id,
            template_name=self.name,
            bounds=self.bounds,
            materials=list(self.materials),
            metadata=copy.deepcopy(self.metadata),
        )


@dataclass
class PlaceableInstance:
    """One mutable, independently transformable copy of a Template."""
    instance_id: str
    template_name: str
    bounds: MeshBounds
    materials: List[str] = field(default_factory=list)
    metadata: Dict[str, Any] = field(default_factory=dict)
    transform: Transform = field(default_factory=Transform)
    collision: Optional[CollisionShape] = None

    def set_scale(self, scale: Vector3) -> None:
        self.transform.scale = scale

    def generate_collision_shape(self) -> CollisionShape:
        """Build box collision geometry from the scaled mesh bounds."""
        extents = self.bounds.scaled(self.transform.scale)
        self.collision = CollisionShape(
            extents=extents,
            center=(0.0, extents.height / 2, 0.0),
        )
        return self.collision

    def __str__(self) -> str:
        return f"PlaceableInstance(id={self.instance_id}, template={self.template_name})"


class Slot:
    """
    A fixed grid position holding at most one bound instance.

    The flip state and the bound instance are separate fields: the flip
    controller only touches ``flip_state``/``orientation`` and the binder
    only writes ``instance`` once, through ``attach``.
    """

    __slots__ = ("index", "row", "column", "position", "flip_state", "orientation", "_instance")

    def __init__(self, index: int, row: int, column: int, position: Vector3) -> None:
        self.index = index
        self.row = row
        self.column = column
        self.position = position
        self.flip_state = FlipState.HIDDEN
        self.orientation = Orientation.FACE_DOWN
        self._instance: Optional[PlaceableInstance] = None

    @property
    def instance(self) -> Optional[PlaceableInstance]:
        return self._instance

    @property
    def is_bound(self) -> bool:
        return self._instance is not None

    def attach(self, instance: PlaceableInstance) -> None:
        """
        Bind an instance to this slot in the card-back orientation.

        The instance reference is published last, in a single assignment,
        so readers never see a bound slot with a stale orientation.
        """
        self.orientation = Orientation.FACE_DOWN
        self._instance = instance

    def __repr__(self) -> str:
        return (
            f"Slot(index={self.index}, row={self.row}, col={self.column}, "
            f"state={self.flip_state.value}, bound={self.is_bound})"
        )


@dataclass(frozen=True, slots=True)
class AnimationRequest:
    """Orientation tween the core asks the renderer to play."""
    slot_index: int
    target_orientation: Orientation
    duration_ms: int = 250
    easing: Easing = Easing.EASE_IN_OUT
