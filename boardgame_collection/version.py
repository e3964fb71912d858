"""
Central version management for Board Game Collection.
"""

from __future__ import annotations

__all__ = ["__app_name__", "__version__", "__release_date__", "__author__", "__license__"]

__app_name__ = "Board Game Collection"
__version__ = "1.0.0"
__release_date__ = "2026-10-19"
__author__ = "Board Game Collection contributors"
__license__ = "MIT"
