"""Harness configuration."""

from .loader import load_config, parse_config
from .models import HarnessConfig

__all__ = [
    "HarnessConfig",
    "load_config",
    "parse_config",
]
