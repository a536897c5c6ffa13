"""Keyword-driven breakdown suggestions for complex tasks."""

import math
from dataclasses import dataclass
from typing import List, Tuple

from ..models.task import CreateTaskInput, Task
from .scorer import DEFAULT_COMPLEXITY

DETAILS_EXCERPT_LENGTH = 200
DEFAULT_PATTERN_HOURS = 8
DEFAULT_PHASE_HOURS = 16


@dataclass(frozen=True)
class BreakdownPattern:
    """A suggestion emitted when any of its keywords appears in the task details."""

    keywords: Tuple[str, ...]
    name_prefix: str
    description: str
    tags: Tuple[str, ...]


@dataclass(frozen=True)
class BreakdownPhase:
    """One step of the generic breakdown used when no pattern matches."""

    name_prefix: str
    description: str
    tags: Tuple[str, ...]
    complexity_offset: int
    hours_multiplier: int


BREAKDOWN_PATTERNS = (
    BreakdownPattern(
        keywords=('research', 'investigate', 'analyze'),
        name_prefix='Research and Analysis for ',
        description='Research requirements, analyze existing solutions, and document findings for: ',
        tags=('research', 'analysis'),
    ),
    BreakdownPattern(
        keywords=('design', 'architecture', 'plan'),
        name_prefix='Design and Planning for ',
        description='Create detailed design and implementation plan for: ',
        tags=('design', 'planning'),
    ),
    BreakdownPattern(
        keywords=('implement', 'develop', 'build', 'code'),
        name_prefix='Core Implementation for ',
        description='Implement the main functionality for: ',
        tags=('implementation', 'development'),
    ),
    BreakdownPattern(
        keywords=('test', 'testing', 'validation'),
        name_prefix='Testing and Validation for ',
        description='Create and execute tests to validate: ',
        tags=('testing', 'validation'),
    ),
    BreakdownPattern(
        keywords=('document', 'documentation', 'guide'),
        name_prefix='Documentation for ',
        description='Create comprehensive documentation for: ',
        tags=('documentation',),
    ),
)

GENERIC_PHASES = (
    BreakdownPhase(
        name_prefix='Planning Phase: ',
        description='Plan and design approach for: ',
        tags=('planning',),
        complexity_offset=-3,
        hours_multiplier=1,
    ),
    BreakdownPhase(
        name_prefix='Implementation Phase: ',
        description='Implement core functionality for: ',
        tags=('implementation',),
        complexity_offset=-2,
        hours_multiplier=2,
    ),
    BreakdownPhase(
        name_prefix='Testing Phase: ',
        description='Test and validate implementation for: ',
        tags=('testing',),
        complexity_offset=-3,
        hours_multiplier=1,
    ),
)


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up (2.5 -> 3)."""
    return int(math.floor(value + 0.5))


class BreakdownGenerator:
    """Synthesizes candidate subtasks for a complex task."""

    def suggest(self, task: Task) -> List[CreateTaskInput]:
        """Generate suggestions in pattern order, or the generic phases if none match."""
        details = task.details.lower()
        excerpt = task.details[:DETAILS_EXCERPT_LENGTH]
        base_complexity = task.complexity or DEFAULT_COMPLEXITY

        suggestions = []
        for pattern in BREAKDOWN_PATTERNS:
            if any(keyword in details for keyword in pattern.keywords):
                suggestions.append(CreateTaskInput(
                    name=pattern.name_prefix + task.name,
                    details=pattern.description + excerpt,
                    project_id=task.project_id,
                    priority=task.priority,
                    complexity=max(1, base_complexity - 2),
                    tags=list(pattern.tags),
                    estimated_hours=round_half_up((task.estimated_hours or DEFAULT_PATTERN_HOURS) / 3),
                ))

        if suggestions:
            return suggestions

        return self._generic_breakdown(task, excerpt, base_complexity)

    def _generic_breakdown(self, task: Task, excerpt: str, base_complexity: int) -> List[CreateTaskInput]:
        """Planning, implementation and testing phases with a 1:2:1 hour split."""
        base_hours = (task.estimated_hours or DEFAULT_PHASE_HOURS) / 3

        return [
            CreateTaskInput(
                name=phase.name_prefix + task.name,
                details=phase.description + excerpt,
                project_id=task.project_id,
                priority=task.priority,
                complexity=max(1, base_complexity + phase.complexity_offset),
                tags=list(phase.tags),
                estimated_hours=round_half_up(base_hours * phase.hours_multiplier),
            )
            for phase in GENERIC_PHASES
        ]
