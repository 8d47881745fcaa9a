"""
API Routers package.
"""

from . import generation, history, settings

__all__ = ["generation", "history", "settings"]
