"""analyze_task_complexity tool."""

import logging
from pathlib import Path
from typing import Any, Callable, Dict, Optional

from pydantic import Field

from ..analysis.analyzer import ComplexityAnalyzer
from ..analysis.report import render_report
from ..errors import TaskNotFoundError, WorkingDirectoryError
from ..models.analysis import ComplexityAnalysisResult
from ..storage.base import Storage
from ..storage.file_storage import FileStorage
from ..utils.config import config_section
from ..utils.storage_config import StorageConfig
from .base import Tool, ToolArguments, ToolResponse

logger = logging.getLogger(__name__)

# `analysis` config keys that supply defaults for omitted arguments
CONFIG_ARGUMENTS = {
    'complexity_threshold': 'complexityThreshold',
    'suggest_breakdown': 'suggestBreakdown',
    'auto_create_subtasks': 'autoCreateSubtasks',
}


class AnalyzeTaskComplexityArguments(ToolArguments):
    task_id: Optional[str] = Field(
        None, alias='taskId',
        description='Specific task ID to analyze (if not provided, analyzes all tasks)',
    )
    project_id: Optional[str] = Field(
        None, alias='projectId',
        description='Filter analysis to a specific project',
    )
    complexity_threshold: float = Field(
        7, ge=1, le=10, alias='complexityThreshold',
        description='Complexity threshold above which tasks should be broken down',
    )
    suggest_breakdown: bool = Field(
        True, alias='suggestBreakdown',
        description='Whether to suggest specific task breakdowns',
    )
    auto_create_subtasks: bool = Field(
        False, alias='autoCreateSubtasks',
        description='Whether to automatically create suggested subtasks',
    )


class ComplexityAnalysisTool(Tool):
    """Analyzes task complexity and suggests breakdowns for overly complex tasks."""

    name = 'analyze_task_complexity'
    description = (
        'Analyze task complexity and suggest breaking down overly complex tasks into smaller, '
        'manageable subtasks. Intelligent complexity analysis feature for better productivity '
        'and progress tracking.'
    )
    arguments_model = AnalyzeTaskComplexityArguments

    def __init__(
        self,
        config: dict,
        storage_config: StorageConfig,
        storage_factory: Callable[[Path], Storage] = FileStorage,
        analyzer: Optional[ComplexityAnalyzer] = None,
    ):
        super().__init__(config, storage_config)
        self.storage_factory = storage_factory
        self.analyzer = analyzer or ComplexityAnalyzer()

    def default_arguments(self) -> Dict[str, Any]:
        analysis_config = config_section(self.config, 'analysis')
        return {
            alias: analysis_config[key]
            for key, alias in CONFIG_ARGUMENTS.items()
            if analysis_config.get(key) is not None
        }

    def run(self, args: AnalyzeTaskComplexityArguments) -> Optional[ComplexityAnalysisResult]:
        """Select, analyze and optionally auto-create subtasks; None when no tasks match."""
        storage = self.storage_factory(self.data_directory(args))

        tasks = self.analyzer.select_tasks(storage, args.task_id, args.project_id)
        if not tasks:
            return None

        results = self.analyzer.analyze(tasks, args.complexity_threshold, args.suggest_breakdown)

        if args.auto_create_subtasks and results.complex_tasks:
            self.analyzer.auto_create_subtasks(storage, results.complex_tasks)

        return results

    def handle(self, args: AnalyzeTaskComplexityArguments) -> ToolResponse:
        try:
            results = self.run(args)
            if results is None:
                return ToolResponse('No tasks found for analysis.')

            return ToolResponse(render_report(results, args.complexity_threshold, args.auto_create_subtasks))

        except (TaskNotFoundError, WorkingDirectoryError) as e:
            return ToolResponse.error(f"Error: {e}")
        except Exception as e:
            logger.error("Task complexity analysis failed: %s", e)
            logger.debug("Traceback for %s", self.name, exc_info=True)
            return ToolResponse.error(f"Error analyzing task complexity: {str(e) or 'Unknown error'}")
