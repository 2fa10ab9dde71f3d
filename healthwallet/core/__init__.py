"""
Core package initialization.
"""

from healthwallet.core.config import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
