"""
Config package for ss58_viewer.

Responsible for:
- the GlobalConfig model
- config I/O helpers (load_global_config)
"""

from .model import GlobalConfig
from .io import load_global_config, parse_global_config

__all__ = ["GlobalConfig", "load_global_config", "parse_global_config"]
