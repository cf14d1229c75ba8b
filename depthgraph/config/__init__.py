"""
Configuration Package

Environment settings.
"""

from .settings import LOG_LEVELS, Settings

__all__ = [
    "LOG_LEVELS",
    "Settings",
]
