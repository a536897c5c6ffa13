"""Agent memory data model."""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from ..utils.datetime_utils import now_iso


@dataclass
class Memory:
    """A titled piece of knowledge an agent wants to keep."""

    id: str
    title: str
    content: str
    category: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)
    created_at: str = field(default_factory=now_iso)
    updated_at: str = field(default_factory=now_iso)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Memory":
        return cls(
            id=data['id'],
            title=data.get('title', ''),
            content=data.get('content', ''),
            category=data.get('category'),
            metadata=dict(data.get('metadata') or {}),
            created_at=data.get('createdAt') or now_iso(),
            updated_at=data.get('updatedAt') or now_iso(),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'title': self.title,
            'content': self.content,
            'category': self.category,
            'metadata': dict(self.metadata),
            'createdAt': self.created_at,
            'updatedAt': self.updated_at,
        }
