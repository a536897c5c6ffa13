"""JSON file storage for projects, tasks and subtasks."""

import json
import logging
import uuid
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..errors import StorageError
from ..models.task import Project, Subtask, Task
from .base import Storage

logger = logging.getLogger(__name__)


class FileStorage(Storage):
    """Keeps every project, task and subtask in a single tasks.json file."""
    
    def __init__(self, data_dir: Path):
        """Initialize storage rooted at the given data directory."""
        self.data_dir = Path(data_dir)
        self.file_path = self.data_dir / 'tasks' / 'tasks.json'
    
    def _load(self) -> Dict[str, List[Dict[str, Any]]]:
        """Read the store, returning empty collections when no file exists yet."""
        if not self.file_path.exists():
            return {'projects': [], 'tasks': [], 'subtasks': []}
        
        try:
            with open(self.file_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise StorageError(f"Failed to read {self.file_path}: {e}") from e
        
        for key in ('projects', 'tasks', 'subtasks'):
            data.setdefault(key, [])
        return data
    
    def _save(self, data: Dict[str, List[Dict[str, Any]]]):
        """Write the whole store back to disk."""
        try:
            self.file_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.file_path, 'w', encoding='utf-8') as f:
                json.dump(data, f, indent=2)
        except OSError as e:
            raise StorageError(f"Failed to write {self.file_path}: {e}") from e
    
    def get_projects(self) -> List[Project]:
        return [Project.from_dict(p) for p in self._load()['projects']]
    
    def get_task(self, task_id: str) -> Optional[Task]:
        for record in self._load()['tasks']:
            if record.get('id') == task_id:
                return Task.from_dict(record)
        return None
    
    def get_tasks(self, project_id: str) -> List[Task]:
        return [
            Task.from_dict(t)
            for t in self._load()['tasks']
            if t.get('projectId') == project_id
        ]
    
    def get_subtasks(self, task_id: str) -> List[Subtask]:
        return [
            Subtask.from_dict(s)
            for s in self._load()['subtasks']
            if s.get('taskId') == task_id
        ]
    
    def create_project(self, project: Project) -> Project:
        data = self._load()
        if not project.id:
            project.id = str(uuid.uuid4())
        data['projects'].append(project.to_dict())
        self._save(data)
        logger.debug("Created project %s", project.id)
        return project
    
    def create_task(self, task: Task) -> Task:
        data = self._load()
        if not task.id:
            task.id = str(uuid.uuid4())
        data['tasks'].append(task.to_dict())
        self._save(data)
        logger.debug("Created task %s in project %s", task.id, task.project_id)
        return task
    
    def create_subtask(self, subtask: Subtask) -> Subtask:
        data = self._load()
        if not subtask.id:
            subtask.id = str(uuid.uuid4())
        data['subtasks'].append(subtask.to_dict())
        self._save(data)
        logger.debug("Created subtask %s for task %s", subtask.id, subtask.task_id)
        return subtask
