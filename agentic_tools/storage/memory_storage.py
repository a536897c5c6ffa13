"""JSON file storage for agent memories."""

import json
import logging
import re
import uuid
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..errors import StorageError
from ..models.memory import Memory
from ..utils.datetime_utils import parse_timestamp
from .base import MemoryStorage

logger = logging.getLogger(__name__)

DEFAULT_CATEGORY = 'general'

_UNSAFE_CHARS_RE = re.compile(r'[^\w\- ]+')


def _safe_filename(title: str) -> str:
    """Turn a memory title into a file name."""
    cleaned = _UNSAFE_CHARS_RE.sub('', title).strip().replace(' ', '_')
    return cleaned[:100] or 'memory'


class FileMemoryStorage(MemoryStorage):
    """Keeps one JSON file per memory under memories/<category>/."""
    
    def __init__(self, data_dir: Path):
        """Initialize storage rooted at the given data directory."""
        self.memories_dir = Path(data_dir) / 'memories'
    
    def _read_all(self) -> List[Memory]:
        """Load every memory file on disk."""
        if not self.memories_dir.exists():
            return []
        
        memories = []
        for path in sorted(self.memories_dir.rglob('*.json')):
            try:
                with open(path, 'r', encoding='utf-8') as f:
                    memories.append(Memory.from_dict(json.load(f)))
            except (OSError, json.JSONDecodeError, KeyError) as e:
                raise StorageError(f"Failed to read memory file {path}: {e}") from e
        return memories
    
    def get_memories(self, category: Optional[str] = None, limit: Optional[int] = None) -> List[Memory]:
        memories = self._read_all()
        if category:
            memories = [m for m in memories if (m.category or '').lower() == category.lower()]
        if limit is not None:
            memories = memories[:limit]
        return memories
    
    def create_memory(self, memory: Memory) -> Memory:
        if not memory.id:
            memory.id = str(uuid.uuid4())
        
        category_dir = self.memories_dir / _safe_filename(memory.category or DEFAULT_CATEGORY)
        path = category_dir / f"{_safe_filename(memory.title)}.json"
        if path.exists():
            path = category_dir / f"{_safe_filename(memory.title)}_{memory.id[:8]}.json"
        
        try:
            category_dir.mkdir(parents=True, exist_ok=True)
            with open(path, 'w', encoding='utf-8') as f:
                json.dump(memory.to_dict(), f, indent=2)
        except OSError as e:
            raise StorageError(f"Failed to write memory file {path}: {e}") from e
        
        logger.debug("Created memory %s at %s", memory.id, path)
        return memory
    
    def get_statistics(self) -> Dict[str, Any]:
        memories = self._read_all()
        
        by_category: Dict[str, int] = {}
        for memory in memories:
            key = memory.category or DEFAULT_CATEGORY
            by_category[key] = by_category.get(key, 0) + 1
        
        timestamps = sorted((m.created_at for m in memories), key=parse_timestamp)
        
        return {
            'total_memories': len(memories),
            'memories_by_category': by_category,
            'oldest_memory': timestamps[0] if timestamps else None,
            'newest_memory': timestamps[-1] if timestamps else None,
        }
