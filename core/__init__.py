"""
Core module containing configuration, logging and application wiring.
"""

from .config import Settings, get_settings
from .logger import logger

__all__ = [
    "Settings",
    "get_settings",
    "logger",
]
