"""Shared test fixtures.

Tasks are built with sensible defaults so each test only spells out the
fields it is exercising. File-backed stores live under pytest's tmp_path.
"""

import pytest

from agentic_tools.models.task import Project, Task
from agentic_tools.storage.file_storage import FileStorage
from agentic_tools.storage.memory_storage import FileMemoryStorage
from agentic_tools.utils.config import get_default_config
from agentic_tools.utils.storage_config import StorageConfig, get_data_directory


@pytest.fixture
def make_task():
    """Factory for tasks with neutral defaults (no heuristic triggers)."""
    counter = {'n': 0}

    def _make(**overrides):
        counter['n'] += 1
        fields = {
            'id': f"task-{counter['n']}",
            'name': f"Task {counter['n']}",
            'details': 'Tidy up',
            'project_id': 'project-1',
            'priority': 5,
        }
        fields.update(overrides)
        return Task(**fields)

    return _make


@pytest.fixture
def config():
    return get_default_config()


@pytest.fixture
def storage_config():
    return StorageConfig()


@pytest.fixture
def storage(tmp_path, storage_config):
    """File storage for tmp_path used as the working directory."""
    return FileStorage(get_data_directory(str(tmp_path), storage_config))


@pytest.fixture
def memory_storage(tmp_path, storage_config):
    return FileMemoryStorage(get_data_directory(str(tmp_path), storage_config))


@pytest.fixture
def project(storage):
    return storage.create_project(Project(id='project-1', name='Website'))
