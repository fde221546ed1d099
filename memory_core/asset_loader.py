"""
Asynchronous loading of a single named asset.

Asset descriptors are JSON documents of the form::

    {"mesh": {"width": 20.0, "height": 4.0, "depth": 20.0},
     "materials": ["metal"], "metadata": {...}}

The blocking fetch runs on a worker thread so the event loop stays free
for selection events while assets are loading.
"""
import asyncio
import json
import logging
from typing import Any, Dict

from .asset_source import AssetSource
from .data_models import MeshBounds, Template
from .exceptions import AssetParseError, LoadError

logger = logging.getLogger(__name__)


def parse_template(name: str, raw: bytes) -> Template:
    """
    Parse a raw asset descriptor into an immutable Template.

    Args:
        name: Asset name the descriptor was fetched under
        raw: Descriptor bytes

    Returns:
        Parsed Template

    Raises:
        AssetParseError: If the descriptor is not valid JSON or lacks a mesh
    """
    try:
        data: Dict[str, Any] = json.loads(raw)
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise AssetParseError(name, f"Asset '{name}' is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise AssetParseError(name, f"Asset '{name}' must be a JSON object")

    try:
        mesh = data["mesh"]
        bounds = MeshBounds(
            width=float(mesh["width"]),
            height=float(mesh["height"]),
            depth=float(mesh["depth"]),
        )
    except (KeyError, TypeError, ValueError) as e:
        raise AssetParseError(name, f"Asset '{name}' has no usable mesh bounds: {e}") from e

    if min(bounds.width, bounds.height, bounds.depth) <= 0:
        raise AssetParseError(name, f"Asset '{name}' has non-positive mesh bounds")

    materials = data.get("materials", [])
    if not isinstance(materials, list) or not all(isinstance(m, str) for m in materials):
        raise AssetParseError(name, f"Asset '{name}' materials must be a list of strings")

    metadata = data.get("metadata", {})
    if not isinstance(metadata, dict):
        raise AssetParseError(name, f"Asset '{name}' metadata must be an object")

    return Template(
        name=name,
        bounds=bounds,
        materials=tuple(materials),
        metadata=metadata,
    )


class AssetLoader:
    """Loads one named asset per call from an AssetSource."""

    def __init__(self, source: AssetSource) -> None:
        self.source = source

    async def load(self, name: str) -> Template:
        """
        Load and parse a named asset without blocking the event loop.

        Raises:
            LoadError: If the asset is missing, unreadable or malformed
        """
        logger.debug("Loading asset '%s'", name)
        try:
            raw = await asyncio.to_thread(self.source.fetch, name)
        except LoadError:
            raise
        except Exception as e:
            raise LoadError(name, f"Unexpected error loading '{name}': {e}") from e

        template = parse_template(name, raw)
        logger.debug("Loaded asset '%s' (%d materials)", name, len(template.materials))
        return template
