"""Tools exposed to agents."""

from typing import List

from ..utils.storage_config import StorageConfig
from .base import Tool, ToolResponse
from .complexity_analysis import ComplexityAnalysisTool
from .list_memories import ListMemoriesTool


def build_tools(config: dict, storage_config: StorageConfig) -> List[Tool]:
    """Create every tool with the file-backed stores."""
    return [
        ComplexityAnalysisTool(config, storage_config),
        ListMemoriesTool(config, storage_config),
    ]


__all__ = ['Tool', 'ToolResponse', 'ComplexityAnalysisTool', 'ListMemoriesTool', 'build_tools']
