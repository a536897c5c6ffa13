"""Core complexity analysis engine."""

import logging
from typing import List, Optional

from ..errors import TaskNotFoundError
from ..models.analysis import AnalysisResult, ComplexityAnalysisResult
from ..models.task import Subtask, Task
from ..storage.base import Storage
from ..utils.datetime_utils import now_iso
from .breakdown import BreakdownGenerator
from .scorer import ComplexityScorer

logger = logging.getLogger(__name__)


class ComplexityAnalyzer:
    """Scores tasks, flags the complex ones and proposes how to split them."""

    def __init__(
        self,
        scorer: Optional[ComplexityScorer] = None,
        generator: Optional[BreakdownGenerator] = None,
    ):
        """Initialize analyzer with its scorer and breakdown generator."""
        self.scorer = scorer or ComplexityScorer()
        self.generator = generator or BreakdownGenerator()

    def select_tasks(
        self,
        storage: Storage,
        task_id: Optional[str] = None,
        project_id: Optional[str] = None,
    ) -> List[Task]:
        """Resolve the tasks to analyze: one task, one project, or every project."""
        if task_id:
            task = storage.get_task(task_id)
            if task is None:
                raise TaskNotFoundError(task_id)
            return [task]

        if project_id:
            return storage.get_tasks(project_id)

        tasks = []
        for project in storage.get_projects():
            tasks.extend(storage.get_tasks(project.id))
        return tasks

    def analyze(
        self,
        tasks: List[Task],
        threshold: float = 7,
        suggest_breakdown: bool = True,
    ) -> ComplexityAnalysisResult:
        """Score every open task and collect those at or above the threshold."""
        complex_tasks = []
        total_complexity = 0
        tasks_analyzed = 0

        for task in tasks:
            if task.is_finished():
                continue

            score, issues = self.scorer.score(task)
            total_complexity += score
            tasks_analyzed += 1

            if self.scorer.is_complex(score, threshold):
                suggestions = self.generator.suggest(task) if suggest_breakdown else []
                complex_tasks.append(AnalysisResult(
                    task=task,
                    analysis_score=score,
                    issues=issues,
                    suggestions=suggestions,
                ))

        logger.info(
            "Analyzed %d tasks: %d complex at threshold %s",
            tasks_analyzed, len(complex_tasks), threshold,
        )

        return ComplexityAnalysisResult(
            complex_tasks=complex_tasks,
            simple_tasks_count=tasks_analyzed - len(complex_tasks),
            total_tasks_analyzed=tasks_analyzed,
            average_complexity=total_complexity / tasks_analyzed if tasks_analyzed > 0 else 0.0,
        )

    def auto_create_subtasks(self, storage: Storage, complex_tasks: List[AnalysisResult]) -> int:
        """Persist every suggestion as a subtask of its task, one write at a time."""
        created = 0
        for result in complex_tasks:
            for suggestion in result.suggestions:
                timestamp = now_iso()
                storage.create_subtask(Subtask(
                    id='',
                    name=suggestion.name,
                    details=suggestion.details,
                    task_id=result.task.id,
                    project_id=result.task.project_id,
                    completed=False,
                    created_at=timestamp,
                    updated_at=timestamp,
                ))
                created += 1

        logger.info("Auto-created %d subtasks for %d complex tasks", created, len(complex_tasks))
        return created
