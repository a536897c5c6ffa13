"""Task model tests"""

from agentic_tools.analysis.scorer import ComplexityScorer
from agentic_tools.models.task import Project, Subtask, Task


class TestTaskFromDict:
    def test_camel_case_fields(self):
        task = Task.from_dict({
            'id': 't1',
            'name': 'N',
            'details': 'D',
            'projectId': 'p1',
            'estimatedHours': 12,
            'dependsOn': ['a'],
            'complexity': 6,
        })
        assert task.project_id == 'p1'
        assert task.estimated_hours == 12
        assert task.depends_on == ['a']
        assert task.complexity == 6

    def test_missing_optional_fields(self):
        task = Task.from_dict({'id': 't1', 'name': 'N', 'details': 'D', 'projectId': 'p1', 'dependsOn': None})
        assert task.complexity is None
        assert task.estimated_hours is None
        assert task.depends_on == []
        assert task.status == 'pending'

    def test_null_text_fields_become_empty(self):
        task = Task.from_dict({'id': 't1', 'name': None, 'details': None, 'projectId': 'p1'})
        assert task.name == ''
        assert task.details == ''
        assert ComplexityScorer().score(task) == (5, [])

    def test_null_text_fields_on_subtask_and_project(self):
        subtask = Subtask.from_dict({'id': 's1', 'name': None, 'details': None, 'taskId': 't1', 'projectId': 'p1'})
        project = Project.from_dict({'id': 'p1', 'name': None, 'description': None})
        assert (subtask.name, subtask.details) == ('', '')
        assert (project.name, project.description) == ('', '')


class TestIsFinished:
    def test_completed_flag(self, make_task):
        assert make_task(completed=True).is_finished()

    def test_done_status(self, make_task):
        assert make_task(status='done').is_finished()

    def test_open_task(self, make_task):
        assert not make_task(status='in-progress').is_finished()
