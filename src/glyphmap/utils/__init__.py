"""Utility functions for glyphmap.

This module provides utility functions including:

- Logging setup and configuration
"""

from glyphmap.utils.logging import configure_logging

__all__ = [
    "configure_logging",
]
