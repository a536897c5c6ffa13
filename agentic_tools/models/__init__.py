"""Data models."""

from .analysis import AnalysisResult, ComplexityAnalysisResult
from .memory import Memory
from .task import CreateTaskInput, Project, Subtask, Task

__all__ = [
    'Project', 'Task', 'Subtask', 'CreateTaskInput', 'Memory',
    'AnalysisResult', 'ComplexityAnalysisResult',
]
