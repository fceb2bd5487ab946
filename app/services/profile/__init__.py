"""
Style profile system.

Plain frequency counts over a board's pins, reduced to top-N preferences.
"""

from app.services.profile.builder import StyleProfileBuilder

__all__ = [
    "StyleProfileBuilder",
]
