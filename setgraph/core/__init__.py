"""
Core configuration and logging for setgraph.
"""

from setgraph.core.config import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
