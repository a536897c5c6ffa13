"""Base tool interface and text responses."""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Type

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..utils.storage_config import (
    StorageConfig,
    get_data_directory,
    get_working_directory_description,
    resolve_working_directory,
)

logger = logging.getLogger(__name__)


@dataclass
class ToolResponse:
    """Single text block returned to the calling agent."""

    text: str
    is_error: bool = False
    recommended_next_step: Optional[str] = None

    @classmethod
    def error(cls, text: str) -> "ToolResponse":
        return cls(text=text, is_error=True)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the tools/call result shape."""
        result: Dict[str, Any] = {
            'content': [{'type': 'text', 'text': self.text}],
        }
        if self.is_error:
            result['isError'] = True
        if self.recommended_next_step:
            result['recommendedNextStep'] = self.recommended_next_step
        return result


class ToolArguments(BaseModel):
    """Arguments shared by every tool."""

    model_config = ConfigDict(populate_by_name=True)

    working_directory: Optional[str] = Field(None, alias='workingDirectory')


def format_validation_error(error: ValidationError) -> str:
    """Flatten pydantic errors into one line."""
    return '; '.join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
        for err in error.errors()
    )


class Tool(ABC):
    """Abstract base class for a callable tool."""

    name: str = ''
    description: str = ''
    arguments_model: Type[ToolArguments] = ToolArguments

    def __init__(self, config: dict, storage_config: StorageConfig):
        """Initialize tool with configuration."""
        self.config = config
        self.storage_config = storage_config

    def input_schema(self) -> Dict[str, Any]:
        """JSON Schema of the arguments, as advertised by tools/list."""
        schema = self.arguments_model.model_json_schema(by_alias=True)
        schema.pop('title', None)
        working_directory = schema.get('properties', {}).get('workingDirectory')
        if working_directory is not None:
            working_directory['description'] = get_working_directory_description(self.storage_config)
            if not self.storage_config.use_global_directory:
                schema.setdefault('required', []).append('workingDirectory')
        return schema

    def data_directory(self, args: ToolArguments) -> Path:
        """Resolve the data directory for this call."""
        working_directory = resolve_working_directory(args.working_directory, self.storage_config)
        return get_data_directory(working_directory, self.storage_config)

    def default_arguments(self) -> Dict[str, Any]:
        """Configured defaults, keyed by argument alias; explicit arguments override them."""
        return {}

    def parse_arguments(self, arguments: Optional[Dict[str, Any]]) -> ToolArguments:
        """Validate configured defaults and the call's own arguments as one payload."""
        if arguments is not None and not isinstance(arguments, dict):
            raise TypeError(f"arguments must be an object, got {type(arguments).__name__}")
        return self.arguments_model.model_validate({**self.default_arguments(), **(arguments or {})})

    def call(self, arguments: Optional[Dict[str, Any]]) -> ToolResponse:
        """Validate raw arguments and run the tool."""
        try:
            args = self.parse_arguments(arguments)
        except ValidationError as e:
            logger.warning("Invalid arguments for %s: %s", self.name, e)
            return ToolResponse.error(f"Error: Invalid arguments for {self.name}: {format_validation_error(e)}")
        except TypeError as e:
            return ToolResponse.error(f"Error: Invalid arguments for {self.name}: {e}")

        return self.handle(args)

    @abstractmethod
    def handle(self, args: ToolArguments) -> ToolResponse:
        """Run the tool; must not raise."""
        pass
