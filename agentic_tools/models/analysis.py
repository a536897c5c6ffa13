"""Complexity analysis result models."""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from .task import CreateTaskInput, Task


@dataclass
class AnalysisResult:
    """A task that crossed the complexity threshold, with its findings."""

    task: Task
    analysis_score: int
    issues: List[str] = field(default_factory=list)
    suggestions: List[CreateTaskInput] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Convert result to dictionary for JSON export."""
        result = self.task.to_dict()
        result['analysisScore'] = self.analysis_score
        result['issues'] = list(self.issues)
        result['suggestions'] = [s.to_dict() for s in self.suggestions]
        return result


@dataclass
class ComplexityAnalysisResult:
    """Aggregate outcome of analyzing a set of tasks."""

    complex_tasks: List[AnalysisResult]
    simple_tasks_count: int
    total_tasks_analyzed: int
    average_complexity: float

    def to_dict(self) -> Dict[str, Any]:
        """Convert result to dictionary for JSON export."""
        return {
            'complexTasks': [t.to_dict() for t in self.complex_tasks],
            'simpleTasksCount': self.simple_tasks_count,
            'totalTasksAnalyzed': self.total_tasks_analyzed,
            'averageComplexity': self.average_complexity,
        }
