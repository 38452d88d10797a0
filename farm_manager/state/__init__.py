"""
Reflex state for the Farm Manager app.
"""

from .app_state import State

__all__ = ["State"]
