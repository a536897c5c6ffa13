"""Protocol bridge."""

from .stdio import ToolServer

__all__ = ['ToolServer']
