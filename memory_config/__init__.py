"""
Configuration package for host-specific settings.

Provides abstract configuration interface and the desktop implementation
backed by environment variables.
"""
from .base import BaseConfiguration, ConfigurationError
from .desktop import DesktopConfiguration

__all__ = [
    'BaseConfiguration',
    'ConfigurationError',
    'DesktopConfiguration'
]
