"""
Deck assembly: clone each loaded template into placeable pairs and shuffle.
"""
import logging
import random
from typing import List, Optional, Sequence, TypeVar

from .data_models import PlaceableInstance, Template, Vector3

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_INSTANCE_SCALE: Vector3 = (0.002, 0.002, 0.002)
DEFAULT_COPIES_PER_TEMPLATE = 2


class DeckBuilder:
    """
    Produces independent placeable instances from loaded templates.

    Every instance gets the configured uniform scale and its own collision
    geometry before it is returned.
    """

    def __init__(self, scale: Vector3 = DEFAULT_INSTANCE_SCALE) -> None:
        self.scale = scale

    def build(
        self,
        templates: Sequence[Template],
        copies_per_template: int = DEFAULT_COPIES_PER_TEMPLATE,
    ) -> List[PlaceableInstance]:
        """
        Clone every template ``copies_per_template`` times.

        Args:
            templates: Loaded templates
            copies_per_template: Instances produced per template

        Returns:
            ``len(templates) * copies_per_template`` instances, grouped by template
        """
        if copies_per_template < 1:
            raise ValueError("copies_per_template must be at least 1")

        instances: List[PlaceableInstance] = []
        for template in templates:
            for copy_index in range(copies_per_template):
                instance = template.clone(f"{template.name}#{copy_index}")
                instance.set_scale(self.scale)
                instance.generate_collision_shape()
                instances.append(instance)

        logger.info("Built %d instances from %d templates", len(instances), len(templates))
        return instances


class Shuffler:
    """Fisher-Yates shuffle over an injectable random source."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng or random.Random()

    @classmethod
    def seeded(cls, seed: int) -> "Shuffler":
        return cls(random.Random(seed))

    def shuffle(self, items: Sequence[T]) -> List[T]:
        """Return a uniformly random permutation of ``items``; the input is left untouched."""
        result = list(items)
        for i in range(len(result) - 1, 0, -1):
            j = self.rng.randint(0, i)
            result[i], result[j] = result[j], result[i]
        return result
