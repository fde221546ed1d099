"""
Desktop configuration read from the environment.

Values come from ``MEMORY_*`` environment variables, with a ``.env`` file
loaded first when present.
"""
import logging
import os
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from .base import BaseConfiguration, ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_ASSET_NAMES = [f"{i:02d}" for i in range(1, 9)]
DEFAULT_ASSET_ROOT = Path(__file__).resolve().parent.parent / "assets"


class DesktopConfiguration(BaseConfiguration):
    """Configuration snapshot taken from the environment at construction."""

    def __init__(self, env_file: Optional[Path] = None, *, load_env: bool = True) -> None:
        if load_env:
            load_dotenv(env_file)

        self._asset_names = self._get_list("MEMORY_ASSET_NAMES", DEFAULT_ASSET_NAMES)
        self._asset_root = Path(os.getenv("MEMORY_ASSET_ROOT", str(DEFAULT_ASSET_ROOT)))
        self._asset_base_url = os.getenv("MEMORY_ASSET_BASE_URL") or None
        self._grid_rows = self._get_int("MEMORY_GRID_ROWS", 4)
        self._grid_columns = self._get_int("MEMORY_GRID_COLUMNS", 4)
        self._grid_spacing = self._get_float("MEMORY_GRID_SPACING", 0.1)
        self._instance_scale = self._get_float("MEMORY_INSTANCE_SCALE", 0.002)
        self._copies_per_template = self._get_int("MEMORY_COPIES_PER_TEMPLATE", 2)
        self._flip_duration_ms = self._get_int("MEMORY_FLIP_DURATION_MS", 250)
        max_loads = self._get_int("MEMORY_MAX_CONCURRENT_LOADS", 0)
        self._max_concurrent_loads = max_loads or None
        seed = os.getenv("MEMORY_SHUFFLE_SEED")
        self._shuffle_seed = self._parse_int("MEMORY_SHUFFLE_SEED", seed) if seed else None
        self._http_timeout = self._get_float("MEMORY_HTTP_TIMEOUT", 15.0)
        self._log_level = os.getenv("MEMORY_LOG_LEVEL", "INFO").upper()

        logger.debug(
            "Configuration loaded: %d assets, %dx%d grid, source=%s",
            len(self._asset_names), self._grid_rows, self._grid_columns,
            self._asset_base_url or self._asset_root,
        )

    @staticmethod
    def _parse_int(key: str, raw: str) -> int:
        try:
            return int(raw)
        except ValueError:
            raise ConfigurationError(f"{key} must be an integer, got {raw!r}") from None

    def _get_int(self, key: str, default: int) -> int:
        raw = os.getenv(key)
        return default if raw is None or raw == "" else self._parse_int(key, raw)

    @staticmethod
    def _get_float(key: str, default: float) -> float:
        raw = os.getenv(key)
        if raw is None or raw == "":
            return default
        try:
            return float(raw)
        except ValueError:
            raise ConfigurationError(f"{key} must be a number, got {raw!r}") from None

    @staticmethod
    def _get_list(key: str, default: List[str]) -> List[str]:
        raw = os.getenv(key)
        if not raw:
            return list(default)
        return [item.strip() for item in raw.split(",") if item.strip()]

    @property
    def asset_names(self) -> List[str]:
        return list(self._asset_names)

    @property
    def asset_root(self) -> Path:
        return self._asset_root

    @property
    def asset_base_url(self) -> Optional[str]:
        return self._asset_base_url

    @property
    def grid_rows(self) -> int:
        return self._grid_rows

    @property
    def grid_columns(self) -> int:
        return self._grid_columns

    @property
    def grid_spacing(self) -> float:
        return self._grid_spacing

    @property
    def instance_scale(self) -> float:
        return self._instance_scale

    @property
    def copies_per_template(self) -> int:
        return self._copies_per_template

    @property
    def flip_duration_ms(self) -> int:
        return self._flip_duration_ms

    @property
    def max_concurrent_loads(self) -> Optional[int]:
        return self._max_concurrent_loads

    @property
    def shuffle_seed(self) -> Optional[int]:
        return self._shuffle_seed

    @property
    def http_timeout(self) -> float:
        return self._http_timeout

    @property
    def log_level(self) -> str:
        return self._log_level
