"""Configuration for conditional."""

from __future__ import annotations

from .loader import ConfigLoader, load_config
from .models import ComparatorConfig, LoggingConfig
from .validator import ConfigValidator

__all__ = [
    "ComparatorConfig",
    "ConfigLoader",
    "ConfigValidator",
    "LoggingConfig",
    "load_config",
]
