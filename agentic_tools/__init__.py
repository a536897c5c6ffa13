"""Agentic Tools: task and memory management tools for agents."""

__version__ = "1.2.0"
