"""
Game session: owns the board and drives deck assembly.

The slots exist from ``start()`` onward and accept selections immediately.
Deck assembly (load, build, shuffle, bind) runs as a single asyncio task
whose outcome is delivered to completion listeners exactly once.
"""
import asyncio
import logging
from enum import Enum
from typing import Callable, List, Optional, Sequence

from .asset_loader import AssetLoader
from .asset_source import AssetSource, FileAssetSource, HttpAssetSource
from .binder import Binder
from .data_models import PlaceableInstance, Slot
from .deck_builder import DEFAULT_COPIES_PER_TEMPLATE, DeckBuilder, Shuffler
from .load_pipeline import LoadPipeline
from .ui_logic.flip_controller import FlipController
from .ui_logic.grid_layout import GridDimensions, GridLayout
from .ui_logic.renderer import Renderer

logger = logging.getLogger(__name__)


class SessionState(Enum):
    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


# Called with None on success, or the exception that ended setup
CompletionCallback = Callable[[Optional[BaseException]], None]


class GameSession:
    """Explicit owner of one game's slots, deck and flip state."""

    def __init__(
        self,
        asset_names: Sequence[str],
        *,
        loader: AssetLoader,
        renderer: Renderer,
        layout: Optional[GridLayout] = None,
        deck_builder: Optional[DeckBuilder] = None,
        shuffler: Optional[Shuffler] = None,
        binder: Optional[Binder] = None,
        copies_per_template: int = DEFAULT_COPIES_PER_TEMPLATE,
        max_concurrent_loads: Optional[int] = None,
        flip_duration_ms: int = 250,
    ) -> None:
        self.asset_names = list(asset_names)
        self.renderer = renderer
        self.layout = layout or GridLayout(GridDimensions())
        self.pipeline = LoadPipeline(loader, max_concurrency=max_concurrent_loads)
        self.deck_builder = deck_builder or DeckBuilder()
        self.shuffler = shuffler or Shuffler()
        self.binder = binder or Binder()
        self.copies_per_template = copies_per_template
        self.flip_duration_ms = flip_duration_ms

        self.state = SessionState.IDLE
        self.slots: List[Slot] = []
        self.deck: List[PlaceableInstance] = []
        self.flip_controller: Optional[FlipController] = None
        self.error: Optional[BaseException] = None

        self._task: Optional[asyncio.Task] = None
        # Source created by from_config; closed with the session
        self._owned_source: Optional[AssetSource] = None
        self._completion_callbacks: List[CompletionCallback] = []

    @classmethod
    def from_config(cls, config, renderer: Renderer, source: Optional[AssetSource] = None) -> "GameSession":
        """
        Build a session from a validated configuration.

        Args:
            config: A ``memory_config.BaseConfiguration``
            renderer: Host renderer receiving instances and animations
            source: Asset source override; derived from the config when None
        """
        config.validate()
        owned_source = None
        if source is None:
            if config.asset_base_url:
                source = HttpAssetSource(config.asset_base_url, timeout=config.http_timeout)
            else:
                source = FileAssetSource(config.asset_root)
            owned_source = source

        shuffler = Shuffler.seeded(config.shuffle_seed) if config.shuffle_seed is not None else Shuffler()
        session = cls(
            config.asset_names,
            loader=AssetLoader(source),
            renderer=renderer,
            layout=GridLayout(GridDimensions(
                rows=config.grid_rows,
                columns=config.grid_columns,
                spacing=config.grid_spacing,
            )),
            deck_builder=DeckBuilder(config.scale_vector),
            shuffler=shuffler,
            copies_per_template=config.copies_per_template,
            max_concurrent_loads=config.max_concurrent_loads,
            flip_duration_ms=config.flip_duration_ms,
        )
        session._owned_source = owned_source
        return session

    # ------------------------------------------------------------------
    def start(self) -> asyncio.Task:
        """
        Create the board and begin deck assembly.

        Must be called from a running event loop. Returns the assembly task.
        """
        if self._task is not None:
            raise RuntimeError("Session already started")

        self.slots = self.layout.generate()
        self.flip_controller = FlipController(
            self.slots, self.renderer, duration_ms=self.flip_duration_ms
        )
        logger.info("Session started with %d slots", len(self.slots))

        self.state = SessionState.LOADING
        self._task = asyncio.create_task(self._assemble(), name="deck-assembly")
        self._task.add_done_callback(self._on_assembly_done)
        return self._task

    async def wait_ready(self) -> List[Slot]:
        """
        Wait for deck assembly to finish.

        Returns:
            The bound slots

        Raises:
            LoadError: If any asset failed to load
            BindError: If the deck could not be bound
        """
        if self._task is None:
            raise RuntimeError("Session not started")
        await asyncio.shield(self._task)
        return self.slots

    async def stop(self) -> None:
        """Cancel an in-flight assembly and release the session's resources."""
        if self._task and not self._task.done():
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
        self.close()

    def close(self) -> None:
        """Close the asset source if this session created it."""
        source, self._owned_source = self._owned_source, None
        if source is not None:
            source.close()
            logger.debug("Closed asset source %s", type(source).__name__)

    def select(self, slot_index: int) -> bool:
        """Forward a resolved tap to the flip controller; False if ignored."""
        if self.flip_controller is None:
            return False
        return self.flip_controller.select(slot_index)

    # ------------------------------------------------------------------
    def add_completion_listener(self, callback: CompletionCallback) -> None:
        """
        Register a one-shot callback for the end of deck assembly.

        Listeners are released after they fire. Registering after completion
        calls the callback immediately with the recorded outcome.
        """
        if self.state in (SessionState.READY, SessionState.FAILED):
            callback(self.error)
            return
        if callback not in self._completion_callbacks:
            self._completion_callbacks.append(callback)

    def remove_completion_listener(self, callback: CompletionCallback) -> None:
        if callback in self._completion_callbacks:
            self._completion_callbacks.remove(callback)

    def _notify_completion(self) -> None:
        callbacks, self._completion_callbacks = self._completion_callbacks, []
        for callback in callbacks:
            try:
                callback(self.error)
            except Exception as exc:
                logger.error("Completion listener error: %s", exc)

    # ------------------------------------------------------------------
    async def _assemble(self) -> None:
        templates = await self.pipeline.load_all(self.asset_names)

        instances = self.deck_builder.build(templates, self.copies_per_template)
        deck = self.shuffler.shuffle(instances)
        self.binder.bind(self.slots, deck)
        self.deck = deck

        for slot in self.slots:
            self._attach(slot)

    def _attach(self, slot: Slot) -> None:
        try:
            self.renderer.attach_instance(slot)
        except Exception as exc:
            # The bind stands; only this slot's scene attachment failed
            logger.error("Renderer failed to attach slot %d: %s", slot.index, exc)

    def _on_assembly_done(self, task: asyncio.Task) -> None:
        if task.cancelled():
            self.error = asyncio.CancelledError()
            self.state = SessionState.FAILED
            logger.info("Deck assembly cancelled")
        elif task.exception() is not None:
            self.error = task.exception()
            self.state = SessionState.FAILED
            logger.error("Deck assembly failed: %s", self.error)
        else:
            self.state = SessionState.READY
            logger.info("Deck ready: %d instances bound", len(self.deck))
        self._notify_completion()

    @property
    def is_ready(self) -> bool:
        return self.state is SessionState.READY

    def get_state_summary(self) -> dict[str, str | int]:
        return {
            'state': self.state.value,
            'slot_count': len(self.slots),
            'deck_size': len(self.deck),
            'bound_count': sum(1 for slot in self.slots if slot.is_bound),
            'pending_listeners': len(self._completion_callbacks),
        }
