"""Project, task and subtask data models."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..utils.datetime_utils import now_iso


@dataclass
class Project:
    """A named container of tasks."""

    id: str
    name: str
    description: str = ""
    created_at: str = field(default_factory=now_iso)
    updated_at: str = field(default_factory=now_iso)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Project":
        """Build a project from its stored JSON form."""
        return cls(
            id=data['id'],
            name=data.get('name') or '',
            description=data.get('description') or '',
            created_at=data.get('createdAt') or now_iso(),
            updated_at=data.get('updatedAt') or now_iso(),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert project to its stored JSON form."""
        return {
            'id': self.id,
            'name': self.name,
            'description': self.description,
            'createdAt': self.created_at,
            'updatedAt': self.updated_at,
        }


@dataclass
class Task:
    """A unit of work belonging to a project."""

    id: str
    name: str
    details: str
    project_id: str
    completed: bool = False
    status: str = 'pending'
    priority: Optional[int] = None
    complexity: Optional[int] = None
    estimated_hours: Optional[float] = None
    depends_on: List[str] = field(default_factory=list)
    tags: List[str] = field(default_factory=list)
    created_at: str = field(default_factory=now_iso)
    updated_at: str = field(default_factory=now_iso)

    def is_finished(self) -> bool:
        """Check whether the task is completed or marked done."""
        return self.completed or self.status == 'done'

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Task":
        """Build a task from its stored JSON form."""
        return cls(
            id=data['id'],
            name=data.get('name') or '',
            details=data.get('details') or '',
            project_id=data.get('projectId', ''),
            completed=bool(data.get('completed', False)),
            status=data.get('status', 'pending'),
            priority=data.get('priority'),
            complexity=data.get('complexity'),
            estimated_hours=data.get('estimatedHours'),
            depends_on=list(data.get('dependsOn') or []),
            tags=list(data.get('tags') or []),
            created_at=data.get('createdAt') or now_iso(),
            updated_at=data.get('updatedAt') or now_iso(),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert task to its stored JSON form."""
        return {
            'id': self.id,
            'name': self.name,
            'details': self.details,
            'projectId': self.project_id,
            'completed': self.completed,
            'status': self.status,
            'priority': self.priority,
            'complexity': self.complexity,
            'estimatedHours': self.estimated_hours,
            'dependsOn': list(self.depends_on),
            'tags': list(self.tags),
            'createdAt': self.created_at,
            'updatedAt': self.updated_at,
        }


@dataclass
class Subtask:
    """A smaller piece of a task."""

    id: str
    name: str
    details: str
    task_id: str
    project_id: str
    completed: bool = False
    created_at: str = field(default_factory=now_iso)
    updated_at: str = field(default_factory=now_iso)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Subtask":
        """Build a subtask from its stored JSON form."""
        return cls(
            id=data['id'],
            name=data.get('name') or '',
            details=data.get('details') or '',
            task_id=data.get('taskId', ''),
            project_id=data.get('projectId', ''),
            completed=bool(data.get('completed', False)),
            created_at=data.get('createdAt') or now_iso(),
            updated_at=data.get('updatedAt') or now_iso(),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert subtask to its stored JSON form."""
        return {
            'id': self.id,
            'name': self.name,
            'details': self.details,
            'taskId': self.task_id,
            'projectId': self.project_id,
            'completed': self.completed,
            'createdAt': self.created_at,
            'updatedAt': self.updated_at,
        }


@dataclass
class CreateTaskInput:
    """Payload describing a task that could be created."""

    name: str
    details: str
    project_id: str
    priority: Optional[int] = None
    complexity: Optional[int] = None
    tags: List[str] = field(default_factory=list)
    estimated_hours: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'details': self.details,
            'projectId': self.project_id,
            'priority': self.priority,
            'complexity': self.complexity,
            'tags': list(self.tags),
            'estimatedHours': self.estimated_hours,
        }
