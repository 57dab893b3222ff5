"""
Top-level package for the SS58 registry viewer.

This package exposes the core architecture (table engine, config, UI adapters).
Most code should import from submodules such as:
    ss58_viewer.core
    ss58_viewer.config
    ss58_viewer.ui
"""

__all__: list[str] = []
