"""
Named lookup of raw asset descriptors.

Sources are synchronous and may block; the asset loader runs them on a
worker thread. Each fetch performs fresh work, nothing is cached here.
"""
import logging
import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

import requests

from .exceptions import AssetNotFoundError, LoadError

logger = logging.getLogger(__name__)

ASSET_SUFFIX = ".json"


class AssetSource(ABC):
    """Abstract named lookup returning the raw bytes of one asset."""

    @abstractmethod
    def fetch(self, name: str) -> bytes:
        """
        Fetch the descriptor for a named asset.

        Args:
            name: Asset name

        Returns:
            Raw descriptor bytes

        Raises:
            AssetNotFoundError: If no asset exists under ``name``
            LoadError: If the asset exists but could not be read
        """

    def close(self) -> None:
        """Release any connections held by the source."""


class FileAssetSource(AssetSource):
    """Reads ``<root>/<name>.json`` from the local filesystem."""

    def __init__(self, root: Path) -> None:
        self.root = Path(root)

    def path_for(self, name: str) -> Path:
        return self.root / f"{name}{ASSET_SUFFIX}"

    def fetch(self, name: str) -> bytes:
        # Names must not escape the asset root
        if os.sep in name or (os.altsep and os.altsep in name):
            raise AssetNotFoundError(name)
        path = self.path_for(name)
        try:
            return path.read_bytes()
        except FileNotFoundError:
            raise AssetNotFoundError(name) from None
        except OSError as e:
            raise LoadError(name, f"Failed to read {path}: {e}") from e


class HttpAssetSource(AssetSource):
    """Fetches ``<base_url>/<name>.json`` over HTTP."""

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 15,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def url_for(self, name: str) -> str:
        return f"{self.base_url}/{name}{ASSET_SUFFIX}"

    def fetch(self, name: str) -> bytes:
        url = self.url_for(name)
        logger.debug("GET %s", url)
        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            raise LoadError(name, f"Request for {url} failed: {e}") from e

        if response.status_code == 404:
            raise AssetNotFoundError(name)
        try:
            response.raise_for_status()
        except requests.HTTPError as e:
            raise LoadError(name, f"Fetching {url} failed: {response.status_code}") from e
        return response.content

    def close(self) -> None:
        self.session.close()
