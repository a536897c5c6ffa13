"""list_memories tool."""

import logging
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

from pydantic import Field

from ..errors import WorkingDirectoryError
from ..models.memory import Memory
from ..storage.base import MemoryStorage
from ..storage.memory_storage import FileMemoryStorage
from ..utils.datetime_utils import format_timestamp, parse_timestamp
from ..utils.config import config_section
from ..utils.storage_config import StorageConfig
from .base import Tool, ToolArguments, ToolResponse

logger = logging.getLogger(__name__)

MAX_LIMIT = 1000
MAX_CATEGORY_LENGTH = 100
CONTENT_PREVIEW_LENGTH = 150
DEFAULT_LIMIT = 50


class ListMemoriesArguments(ToolArguments):
    category: Optional[str] = Field(None, description='Filter memories by category')
    limit: Optional[int] = Field(
        None,
        description='Maximum number of memories to return',
        json_schema_extra={'minimum': 1, 'maximum': MAX_LIMIT},
    )


def _format_filters(category: Optional[str]) -> str:
    filters = [f"Category: {category}"] if category else []
    return ', '.join(filters) or 'None'


def _format_memory(index: int, memory: Memory) -> str:
    content = memory.content[:CONTENT_PREVIEW_LENGTH]
    if len(memory.content) > CONTENT_PREVIEW_LENGTH:
        content += '...'
    return (
        f"**{index}. {memory.title}**\n"
        f"Content: {content}\n"
        f"Category: {memory.category or 'Not specified'}\n"
        f"Created: {format_timestamp(memory.created_at)}"
    )


class ListMemoriesTool(Tool):
    """Lists memories with optional filtering by category and limit."""

    name = 'list_memories'
    description = 'List memories with optional filtering by category and limit'
    arguments_model = ListMemoriesArguments

    def __init__(
        self,
        config: dict,
        storage_config: StorageConfig,
        storage_factory: Callable[[Path], MemoryStorage] = FileMemoryStorage,
    ):
        super().__init__(config, storage_config)
        self.storage_factory = storage_factory

    def default_arguments(self) -> Dict[str, Any]:
        default_limit = config_section(self.config, 'memories').get('default_limit')
        return {'limit': default_limit} if default_limit is not None else {}

    def handle(self, args: ListMemoriesArguments) -> ToolResponse:
        limit = args.limit if args.limit is not None else DEFAULT_LIMIT
        category = args.category.strip() if args.category else None

        if limit < 1 or limit > MAX_LIMIT:
            return ToolResponse.error(f"Error: Limit must be between 1 and {MAX_LIMIT}.")

        if category and len(category) > MAX_CATEGORY_LENGTH:
            return ToolResponse.error(f"Error: Category must be {MAX_CATEGORY_LENGTH} characters or less.")

        try:
            storage = self.storage_factory(self.data_directory(args))
            memories = storage.get_memories(category or None, limit)

            if not memories:
                return ToolResponse(
                    "📝 No memories found.\n"
                    "\n"
                    f"**Filters:** {_format_filters(category)}\n"
                    "\n"
                    "Create some memories using the create_memory tool to get started!",
                    recommended_next_step='create_memory',
                )

            return ToolResponse(
                self._render(memories, category, limit, storage.get_statistics()),
                recommended_next_step='get_memory',
            )

        except WorkingDirectoryError as e:
            return ToolResponse.error(f"Error: {e}")
        except Exception as e:
            logger.error("Listing memories failed: %s", e)
            logger.debug("Traceback for %s", self.name, exc_info=True)
            return ToolResponse.error(f"Error listing memories: {str(e) or 'Unknown error'}")

    def _render(self, memories: List[Memory], category: Optional[str], limit: int, stats: dict) -> str:
        """Newest memories first, followed by store-wide statistics."""
        ordered = sorted(memories, key=lambda m: parse_timestamp(m.created_at), reverse=True)
        memory_list = "\n\n".join(
            _format_memory(index, memory) for index, memory in enumerate(ordered, start=1)
        )

        oldest = stats.get('oldest_memory')
        newest = stats.get('newest_memory')

        return (
            f"📝 Found {len(memories)} memory(ies):\n"
            "\n"
            f"**Filters:** {_format_filters(category)}\n"
            f"**Limit:** {limit}\n"
            "\n"
            f"{memory_list}\n"
            "\n"
            "---\n"
            "\n"
            "**📊 Overall Statistics:**\n"
            f"• Total memories: {stats.get('total_memories', 0)}\n"
            f"• Categories: {len(stats.get('memories_by_category', {}))}\n"
            f"• Oldest memory: {format_timestamp(oldest) if oldest else 'None'}\n"
            f"• Newest memory: {format_timestamp(newest) if newest else 'None'}\n"
            "\n"
            "Use get_memory with a specific ID to see full details, or search_memories for text-based search."
        )
