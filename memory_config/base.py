"""Abstract configuration shared by every host."""
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Optional, Tuple


class ConfigurationError(Exception):
    """Raised when configuration values are missing or inconsistent."""


class BaseConfiguration(ABC):
    """
    Settings for one game session.

    Subclasses decide where values come from; the derived properties and
    validation live here so every host checks the same rules.
    """

    @property
    @abstractmethod
    def asset_names(self) -> List[str]:
        """Ordered names of the assets that make up the deck."""

    @property
    @abstractmethod
    def asset_root(self) -> Path:
        """Directory holding ``<name>.json`` asset descriptors."""

    @property
    @abstractmethod
    def asset_base_url(self) -> Optional[str]:
        """Base URL for HTTP asset loading; None to load from ``asset_root``."""

    @property
    @abstractmethod
    def grid_rows(self) -> int: ...

    @property
    @abstractmethod
    def grid_columns(self) -> int: ...

    @property
    @abstractmethod
    def grid_spacing(self) -> float: ...

    @property
    @abstractmethod
    def instance_scale(self) -> float: ...

    @property
    @abstractmethod
    def copies_per_template(self) -> int: ...

    @property
    @abstractmethod
    def flip_duration_ms(self) -> int: ...

    @property
    @abstractmethod
    def max_concurrent_loads(self) -> Optional[int]:
        """Upper bound on simultaneous asset loads; None for unbounded."""

    @property
    @abstractmethod
    def shuffle_seed(self) -> Optional[int]: ...

    @property
    @abstractmethod
    def http_timeout(self) -> float: ...

    @property
    @abstractmethod
    def log_level(self) -> str: ...

    @property
    def slot_count(self) -> int:
        return self.grid_rows * self.grid_columns

    @property
    def deck_size(self) -> int:
        return len(self.asset_names) * self.copies_per_template

    @property
    def scale_vector(self) -> Tuple[float, float, float]:
        return (self.instance_scale, self.instance_scale, self.instance_scale)

    def validate(self) -> None:
        """
        Check that the settings describe a playable board.

        Raises:
            ConfigurationError: On the first invalid value found
        """
        if self.grid_rows < 1 or self.grid_columns < 1:
            raise ConfigurationError("Grid rows and columns must be positive")
        if self.grid_spacing <= 0:
            raise ConfigurationError("Grid spacing must be positive")
        if self.instance_scale <= 0:
            raise ConfigurationError("Instance scale must be positive")
        if self.copies_per_template < 1:
            raise ConfigurationError("Copies per template must be at least 1")
        if self.flip_duration_ms < 0:
            raise ConfigurationError("Flip duration must not be negative")
        if self.max_concurrent_loads is not None and self.max_concurrent_loads < 1:
            raise ConfigurationError("Max concurrent loads must be at least 1")
        if not self.asset_names:
            raise ConfigurationError("At least one asset name is required")
        if len(set(self.asset_names)) != len(self.asset_names):
            raise ConfigurationError("Asset names must be unique")
        if self.deck_size != self.slot_count:
            raise ConfigurationError(
                f"Deck size {self.deck_size} ({len(self.asset_names)} assets x "
                f"{self.copies_per_template}) does not match {self.slot_count} grid slots"
            )
