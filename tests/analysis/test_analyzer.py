"""ComplexityAnalyzer tests"""

from unittest.mock import MagicMock

import pytest

from agentic_tools.analysis.analyzer import ComplexityAnalyzer
from agentic_tools.errors import TaskNotFoundError
from agentic_tools.models.task import Project, Subtask

COMPLEX_DETAILS = 'Touch the database, the api and the security layer'


@pytest.fixture
def analyzer():
    return ComplexityAnalyzer()


class TestSelectTasks:
    def test_single_task(self, analyzer, make_task):
        task = make_task()
        storage = MagicMock()
        storage.get_task.return_value = task
        assert analyzer.select_tasks(storage, task_id=task.id) == [task]
        storage.get_task.assert_called_once_with(task.id)

    def test_missing_task_raises(self, analyzer):
        storage = MagicMock()
        storage.get_task.return_value = None
        with pytest.raises(TaskNotFoundError) as exc_info:
            analyzer.select_tasks(storage, task_id='nope')
        assert str(exc_info.value) == 'Task with ID "nope" not found.'

    def test_task_id_wins_over_project_id(self, analyzer, make_task):
        storage = MagicMock()
        storage.get_task.return_value = make_task()
        analyzer.select_tasks(storage, task_id='task-1', project_id='project-1')
        storage.get_tasks.assert_not_called()

    def test_project_tasks(self, analyzer, make_task):
        tasks = [make_task(), make_task()]
        storage = MagicMock()
        storage.get_tasks.return_value = tasks
        assert analyzer.select_tasks(storage, project_id='project-1') == tasks
        storage.get_projects.assert_not_called()

    def test_all_projects_concatenated_in_order(self, analyzer, make_task):
        a1, a2, b1 = make_task(project_id='a'), make_task(project_id='a'), make_task(project_id='b')
        storage = MagicMock()
        storage.get_projects.return_value = [Project(id='a', name='A'), Project(id='b', name='B')]
        storage.get_tasks.side_effect = lambda project_id: {'a': [a1, a2], 'b': [b1]}[project_id]
        assert analyzer.select_tasks(storage) == [a1, a2, b1]

    def test_empty_selection_is_not_an_error(self, analyzer):
        storage = MagicMock()
        storage.get_projects.return_value = []
        assert analyzer.select_tasks(storage) == []


class TestAnalyze:
    def test_finished_tasks_are_ignored(self, analyzer, make_task):
        tasks = [
            make_task(details=COMPLEX_DETAILS, completed=True),
            make_task(details=COMPLEX_DETAILS, status='done'),
            make_task(complexity=9, status='done'),
            make_task(complexity=3),
        ]
        result = analyzer.analyze(tasks, threshold=7)
        assert result.complex_tasks == []
        assert result.simple_tasks_count == 1
        assert result.total_tasks_analyzed == 1
        assert result.average_complexity == 3

    def test_score_equal_to_threshold_is_complex(self, analyzer, make_task):
        task = make_task(details=COMPLEX_DETAILS)
        result = analyzer.analyze([task], threshold=7)
        assert len(result.complex_tasks) == 1
        complex_task = result.complex_tasks[0]
        assert complex_task.task is task
        assert complex_task.analysis_score == 7
        assert complex_task.issues == ['Contains 3 high-complexity keywords']

    def test_counts_and_average(self, analyzer, make_task):
        tasks = [make_task(complexity=2), make_task(complexity=4), make_task(complexity=9)]
        result = analyzer.analyze(tasks, threshold=7)
        assert len(result.complex_tasks) == 1
        assert result.simple_tasks_count == 2
        assert result.total_tasks_analyzed == 3
        assert result.average_complexity == pytest.approx(5.0)

    def test_suggestions_for_complex_tasks(self, analyzer, make_task):
        result = analyzer.analyze([make_task(complexity=8)], threshold=7)
        assert len(result.complex_tasks[0].suggestions) == 3

    def test_no_suggestions_when_not_requested(self, analyzer, make_task):
        result = analyzer.analyze([make_task(complexity=8)], threshold=7, suggest_breakdown=False)
        assert result.complex_tasks[0].suggestions == []

    def test_no_tasks_gives_zero_average(self, analyzer):
        result = analyzer.analyze([], threshold=7)
        assert result.total_tasks_analyzed == 0
        assert result.average_complexity == 0.0


class TestAutoCreateSubtasks:
    def test_one_subtask_per_suggestion(self, analyzer, make_task):
        tasks = [
            make_task(id='t1', project_id='p1', complexity=8),
            make_task(id='t2', project_id='p2', complexity=9),
        ]
        result = analyzer.analyze(tasks, threshold=7)
        storage = MagicMock()

        created = analyzer.auto_create_subtasks(storage, result.complex_tasks)

        assert created == 6
        assert storage.create_subtask.call_count == 6
        subtasks = [c.args[0] for c in storage.create_subtask.call_args_list]
        assert [(s.task_id, s.project_id) for s in subtasks] == [('t1', 'p1')] * 3 + [('t2', 'p2')] * 3
        for subtask in subtasks:
            assert isinstance(subtask, Subtask)
            assert subtask.id == ''
            assert subtask.completed is False
            assert subtask.created_at == subtask.updated_at
            assert subtask.created_at.endswith('Z')

    def test_names_and_details_come_from_suggestions(self, analyzer, make_task):
        result = analyzer.analyze([make_task(complexity=8, name='Cleanup')], threshold=7)
        storage = MagicMock()
        analyzer.auto_create_subtasks(storage, result.complex_tasks)
        first = storage.create_subtask.call_args_list[0].args[0]
        assert first.name == 'Planning Phase: Cleanup'
        assert first.details == result.complex_tasks[0].suggestions[0].details

    def test_failure_stops_and_propagates(self, analyzer, make_task):
        result = analyzer.analyze([make_task(complexity=8)], threshold=7)
        storage = MagicMock()
        storage.create_subtask.side_effect = [None, OSError('disk full')]
        with pytest.raises(OSError):
            analyzer.auto_create_subtasks(storage, result.complex_tasks)
        assert storage.create_subtask.call_count == 2

    def test_persists_to_file_storage(self, analyzer, storage, project, make_task):
        task = storage.create_task(make_task(complexity=8))
        result = analyzer.analyze([task], threshold=7)
        analyzer.auto_create_subtasks(storage, result.complex_tasks)
        subtasks = storage.get_subtasks(task.id)
        assert len(subtasks) == 3
        assert all(s.id for s in subtasks)
