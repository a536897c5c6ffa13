"""Storage interfaces consumed by the tools."""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from ..models.memory import Memory
from ..models.task import Project, Subtask, Task


class Storage(ABC):
    """Abstract base class for project, task and subtask persistence."""
    
    @abstractmethod
    def get_projects(self) -> List[Project]:
        """Return all projects in storage order."""
        pass
    
    @abstractmethod
    def get_task(self, task_id: str) -> Optional[Task]:
        """Return a task by id, or None when it does not exist."""
        pass
    
    @abstractmethod
    def get_tasks(self, project_id: str) -> List[Task]:
        """Return the tasks of a project in storage order."""
        pass
    
    @abstractmethod
    def create_subtask(self, subtask: Subtask) -> Subtask:
        """Persist a subtask, assigning an id when it has none."""
        pass
    
    @abstractmethod
    def get_subtasks(self, task_id: str) -> List[Subtask]:
        """Return the subtasks of a task."""
        pass
    
    @abstractmethod
    def create_project(self, project: Project) -> Project:
        """Persist a project, assigning an id when it has none."""
        pass
    
    @abstractmethod
    def create_task(self, task: Task) -> Task:
        """Persist a task, assigning an id when it has none."""
        pass


class MemoryStorage(ABC):
    """Abstract base class for agent memory persistence."""
    
    @abstractmethod
    def get_memories(self, category: Optional[str] = None, limit: Optional[int] = None) -> List[Memory]:
        """Return memories, optionally filtered by category and capped at limit."""
        pass
    
    @abstractmethod
    def create_memory(self, memory: Memory) -> Memory:
        """Persist a memory, assigning an id when it has none."""
        pass
    
    @abstractmethod
    def get_statistics(self) -> Dict[str, Any]:
        """Return total count, per-category counts and oldest/newest timestamps."""
        pass
