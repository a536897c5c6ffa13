"""Human-readable complexity analysis report."""

from typing import Callable, Dict, Tuple

from ..models.analysis import ComplexityAnalysisResult
from .scorer import format_number

PREVIEW_LENGTH = 100

Section = Callable[[ComplexityAnalysisResult, float], str]


def _summary(results: ComplexityAnalysisResult, threshold: float) -> str:
    return (
        "🔍 **Task Complexity Analysis Report**\n"
        "\n"
        "📊 **Summary:**\n"
        f"• Total tasks analyzed: {results.total_tasks_analyzed}\n"
        f"• Complex tasks (≥{format_number(threshold)}): {len(results.complex_tasks)}\n"
        f"• Simple tasks (<{format_number(threshold)}): {results.simple_tasks_count}\n"
        f"• Average complexity: {results.average_complexity:.1f}/10\n"
        "\n"
    )


def _all_clear(results: ComplexityAnalysisResult, threshold: float) -> str:
    return (
        "✅ **Great news!** All tasks are within the complexity threshold. "
        "Your tasks are well-scoped and manageable."
    )


def _next_step_pointer(results: ComplexityAnalysisResult, threshold: float) -> str:
    return (
        "\n\n👉 **Your Next Step:** You can proceed to determine your next task "
        "using `get_next_task_recommendation`.\n"
        "    *   Example: `get_next_task_recommendation({ projectId: \"project_id_if_known_or_relevant\" })`"
    )


def _complex_task_list(results: ComplexityAnalysisResult, threshold: float) -> str:
    blocks = ["⚠️ **Complex Tasks Requiring Attention:**\n\n"]
    for index, result in enumerate(results.complex_tasks, start=1):
        details = result.task.details
        preview = details[:PREVIEW_LENGTH] + ('...' if len(details) > PREVIEW_LENGTH else '')
        breakdown = "\n".join(
            f"   • {s.name} (Est: {s.estimated_hours}h)" for s in result.suggestions
        )
        blocks.append(
            f"{index}. **{result.task.name}** (Complexity: {result.analysis_score}/10)\n"
            f"   📝 {preview}\n"
            f"   ⚠️ Issues: {', '.join(result.issues)}\n"
            "\n"
            "   💡 **Suggested Breakdown:**\n"
            f"{breakdown}\n"
            "\n"
        )
    return "".join(blocks)


def _auto_created_notice(results: ComplexityAnalysisResult, threshold: float) -> str:
    return (
        "✅ **Auto-created subtasks** for all complex tasks. "
        "Check your subtasks to see the breakdown.\n\n"
    )


def _actions_header(results: ComplexityAnalysisResult, threshold: float) -> str:
    return "\n👉 **Your Actions: Address Complex Tasks & Proceed**\n\n"


def _create_subtasks_step(results: ComplexityAnalysisResult, threshold: float) -> str:
    return (
        "1.  **Break Down Complex Tasks:** For each complex task listed above, review the \"Suggested Breakdown.\" "
        "You can create these as subtasks using the `create_subtask` tool or simplify the main task using `update_task`.\n"
        "    *   Example for `create_subtask`: `create_subtask({ taskId: \"task_id_from_above\", name: \"suggested_subtask_name\", details: \"...\" })`\n"
        "    *   Example for `update_task`: `update_task({ id: \"task_id_from_above\", details: \"simplified_details\", complexity: new_lower_complexity })`\n\n"
    )


def _review_subtasks_step(results: ComplexityAnalysisResult, threshold: float) -> str:
    return (
        "1.  **Review Auto-Created Subtasks:** Subtasks have been automatically created based on the suggestions. "
        "Review them using `list_subtasks` and refine them if necessary using `update_subtask`.\n"
        "    *   Example: `list_subtasks({ taskId: \"task_id_from_above\" })`\n\n"
    )


def _closing_steps(results: ComplexityAnalysisResult, threshold: float) -> str:
    return (
        "2.  **Re-analyze (Optional):** After addressing the complexities, you can re-run this analysis "
        "for a specific task to confirm its new complexity score.\n"
        "    *   Example: `analyze_task_complexity({ taskId: \"task_id_from_above\" })`\n\n"
        "3.  **Determine Next Task:** Once tasks are appropriately scoped, use the "
        "`get_next_task_recommendation` tool to decide what to work on next.\n"
        "    *   Example: `get_next_task_recommendation({ projectId: \"project_id_if_known_or_relevant\" })`\n\n"
        "💡 **Pro Tip:** Well-scoped tasks lead to better progress tracking and less overwhelming work sessions!"
    )


# (has complex tasks, subtasks auto-created) -> sections, in order
REPORT_SECTIONS: Dict[Tuple[bool, bool], Tuple[Section, ...]] = {
    (False, False): (_summary, _all_clear, _next_step_pointer),
    (False, True): (_summary, _all_clear, _next_step_pointer),
    (True, False): (
        _summary, _complex_task_list,
        _actions_header, _create_subtasks_step, _closing_steps,
    ),
    (True, True): (
        _summary, _complex_task_list, _auto_created_notice,
        _actions_header, _review_subtasks_step, _closing_steps,
    ),
}


def render_report(results: ComplexityAnalysisResult, threshold: float, auto_created: bool) -> str:
    """Render the analysis as markdown-flavored text."""
    sections = REPORT_SECTIONS[(bool(results.complex_tasks), bool(auto_created))]
    return "".join(section(results, threshold) for section in sections)
