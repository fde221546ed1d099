"""Test doubles shared across the suite."""
from __future__ import annotations

import asyncio
import json
import threading
import time
from typing import Dict, Iterable, List, Optional

from memory_core.asset_source import AssetSource
from memory_core.data_models import AnimationRequest, MeshBounds, Slot, Template
from memory_core.exceptions import AssetNotFoundError, LoadError
from memory_core.ui_logic.renderer import Renderer

DEFAULT_NAMES = [f"{i:02d}" for i in range(1, 9)]


def descriptor(width: float = 20.0, height: float = 10.0, depth: float = 20.0,
               materials: Optional[List[str]] = None, **metadata) -> bytes:
    return json.dumps({
        "mesh": {"width": width, "height": height, "depth": depth},
        "materials": materials if materials is not None else ["metal"],
        "metadata": metadata,
    }).encode("utf-8")


def make_template(name: str, **metadata) -> Template:
    return Template(
        name=name,
        bounds=MeshBounds(20.0, 10.0, 20.0),
        materials=("metal",),
        metadata=dict(metadata),
    )


class MemorySource(AssetSource):
    """In-memory asset source with optional per-name failures and delays."""

    def __init__(
        self,
        names: Iterable[str] = DEFAULT_NAMES,
        *,
        failing: Iterable[str] = (),
        delays: Optional[Dict[str, float]] = None,
    ) -> None:
        self.assets = {name: descriptor(label=name) for name in names}
        self.failing = set(failing)
        self.delays = delays or {}
        self.calls: List[str] = []
        self._lock = threading.Lock()

    def fetch(self, name: str) -> bytes:
        with self._lock:
            self.calls.append(name)
        delay = self.delays.get(name)
        if delay:
            time.sleep(delay)
        if name in self.failing:
            raise LoadError(name, f"Simulated failure for '{name}'")
        if name not in self.assets:
            raise AssetNotFoundError(name)
        return self.assets[name]


class AsyncFakeLoader:
    """Loader double driven purely by asyncio, so cancellation is observable."""

    def __init__(
        self,
        *,
        delays: Optional[Dict[str, float]] = None,
        failing: Iterable[str] = (),
        default_delay: float = 0.0,
    ) -> None:
        self.delays = delays or {}
        self.failing = set(failing)
        self.default_delay = default_delay
        self.started: List[str] = []
        self.completed: List[str] = []
        self.cancelled: List[str] = []
        self.active = 0
        self.max_active = 0

    async def load(self, name: str) -> Template:
        self.started.append(name)
        self.active += 1
        self.max_active = max(self.max_active, self.active)
        try:
            await asyncio.sleep(self.delays.get(name, self.default_delay))
            if name in self.failing:
                raise LoadError(name, f"Simulated failure for '{name}'")
            self.completed.append(name)
            return make_template(name)
        except asyncio.CancelledError:
            self.cancelled.append(name)
            raise
        finally:
            self.active -= 1


class RecordingRenderer(Renderer):
    def __init__(self) -> None:
        self.attached: List[int] = []
        self.requests: List[AnimationRequest] = []

    def attach_instance(self, slot: Slot) -> None:
        self.attached.append(slot.index)

    def animate(self, request: AnimationRequest) -> None:
        self.requests.append(request)
