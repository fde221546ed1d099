"""
Aggregate loading of an ordered list of assets.

All loads run concurrently (optionally bounded); the aggregate succeeds only
when every load succeeds and preserves input order in its result. The first
failure cancels the loads still in flight and is re-raised.
"""
import asyncio
import logging
from typing import List, Optional, Sequence

from .asset_loader import AssetLoader
from .data_models import Template

logger = logging.getLogger(__name__)


class LoadPipeline:
    """Runs AssetLoader over a fixed sequence of names as one all-or-nothing load."""

    def __init__(self, loader: AssetLoader, max_concurrency: Optional[int] = None) -> None:
        """
        Args:
            loader: Loader used for every individual asset
            max_concurrency: Upper bound on simultaneous loads, None for unbounded
        """
        if max_concurrency is not None and max_concurrency < 1:
            raise ValueError("max_concurrency must be at least 1")
        self.loader = loader
        self.max_concurrency = max_concurrency

    async def load_all(self, names: Sequence[str]) -> List[Template]:
        """
        Load every named asset.

        Args:
            names: Asset names; result index i corresponds to names[i]

        Returns:
            Templates in input order

        Raises:
            LoadError: The first individual failure; no partial result is returned
        """
        if not names:
            return []

        logger.info("Loading %d assets", len(names))
        semaphore = asyncio.Semaphore(self.max_concurrency) if self.max_concurrency else None

        async def load_one(name: str) -> Template:
            if semaphore is None:
                return await self.loader.load(name)
            async with semaphore:
                return await self.loader.load(name)

        tasks = [asyncio.create_task(load_one(name), name=f"load-asset-{name}") for name in names]
        try:
            done, pending = await asyncio.wait(tasks, return_when=asyncio.FIRST_EXCEPTION)
        except asyncio.CancelledError:
            await self._cancel(tasks)
            raise

        if pending:
            await self._cancel(pending)

        # Retrieve every finished task's exception, then report the earliest name's
        errors = [
            task.exception() for task in tasks
            if task in done and not task.cancelled()
        ]
        error = next((e for e in errors if e is not None), None)
        if error is not None:
            logger.error("Asset loading failed: %s", error)
            raise error

        templates = [task.result() for task in tasks]
        logger.info("Loaded %d assets", len(templates))
        return templates

    @staticmethod
    async def _cancel(tasks) -> None:
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
