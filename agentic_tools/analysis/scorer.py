"""Heuristic complexity scoring for tasks."""

from typing import List, Tuple

from ..models.task import Task

DEFAULT_COMPLEXITY = 5
MIN_SCORE = 1
MAX_SCORE = 10

HIGH_COMPLEXITY_KEYWORDS = [
    'architecture', 'system', 'integration', 'security', 'performance',
    'scalability', 'database', 'api', 'framework', 'refactor', 'migration',
]

ACTION_VERBS = [
    'implement', 'create', 'build', 'develop', 'design', 'setup',
    'configure', 'test', 'deploy', 'document', 'research',
]


def format_number(value: float) -> str:
    """Whole numbers without a trailing .0, anything else exactly as given."""
    return str(int(value)) if float(value).is_integer() else str(value)


def count_matches(text: str, vocabulary: List[str]) -> int:
    """Count how many vocabulary terms occur as substrings of text."""
    return sum(1 for term in vocabulary if term in text)


class ComplexityScorer:
    """Scores a task from 1 to 10 by adding fixed penalties to its base complexity."""

    def score(self, task: Task) -> Tuple[int, List[str]]:
        """Compute the complexity score and the findings that raised it."""
        score = task.complexity or DEFAULT_COMPLEXITY
        issues: List[str] = []

        if len(task.name) > 50:
            score += 1
            issues.append('Task name is very long, suggesting multiple concerns')

        details = task.details.lower()

        high_complexity_matches = count_matches(details, HIGH_COMPLEXITY_KEYWORDS)
        if high_complexity_matches > 2:
            score += 2
            issues.append(f"Contains {high_complexity_matches} high-complexity keywords")

        action_matches = count_matches(details, ACTION_VERBS)
        if action_matches > 3:
            score += 1
            issues.append(f"Contains {action_matches} different action verbs, suggesting multiple tasks")

        if len(task.details) > 500:
            score += 1
            issues.append('Task description is very detailed, suggesting high complexity')

        if task.estimated_hours is not None and task.estimated_hours > 20:
            score += 1
            issues.append(f"High time estimate ({format_number(task.estimated_hours)} hours) suggests complexity")

        if task.depends_on and len(task.depends_on) > 3:
            score += 1
            issues.append(f"Many dependencies ({len(task.depends_on)}) suggest complex coordination")

        # Stored complexity is not validated, so clamp both ends
        return max(MIN_SCORE, min(MAX_SCORE, score)), issues

    def is_complex(self, score: int, threshold: float) -> bool:
        """A task is complex when its score reaches the threshold."""
        return score >= threshold
