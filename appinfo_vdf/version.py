"""
Central version management for appinfo-vdf.
"""

from __future__ import annotations

__all__ = ["__app_name__", "__version__", "__release_date__", "__author__", "__license__"]

__app_name__ = "appinfo-vdf"
__version__ = "1.0.0"
__release_date__ = "2026-10-17"
__author__ = "SwitchBros"
__license__ = "MIT"
