"""Storage directory resolution."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from ..errors import WorkingDirectoryError
from .config import config_section

DEFAULT_DIRECTORY_NAME = '.agentic-tools-mcp'


@dataclass
class StorageConfig:
    """Where tool data is kept."""

    use_global_directory: bool = False
    directory_name: str = DEFAULT_DIRECTORY_NAME

    @classmethod
    def from_config(cls, config: Dict[str, Any], use_global_directory: bool = False) -> "StorageConfig":
        """Build from the `storage` config section; the CLI flag wins when set."""
        storage_config = config_section(config, 'storage')
        return cls(
            use_global_directory=use_global_directory or storage_config.get('use_global_directory', False),
            directory_name=storage_config.get('directory_name', DEFAULT_DIRECTORY_NAME),
        )


def get_global_storage_directory(config: Optional[StorageConfig] = None) -> str:
    """Get the global storage directory path (~/.agentic-tools-mcp)."""
    name = config.directory_name if config else DEFAULT_DIRECTORY_NAME
    return str(Path.home() / name)


def resolve_working_directory(provided_path: Optional[str], config: StorageConfig) -> str:
    """Resolve the directory whose data store a tool call should use."""
    if config.use_global_directory:
        return get_global_storage_directory(config)
    
    if not provided_path:
        raise WorkingDirectoryError('workingDirectory is required when not using --claude flag')
    
    return provided_path


def get_data_directory(working_directory: str, config: StorageConfig) -> Path:
    """Directory holding the data files for a resolved working directory."""
    if config.use_global_directory:
        return Path(working_directory)
    return Path(working_directory) / config.directory_name


def get_working_directory_description(config: StorageConfig) -> str:
    """Describe the workingDirectory parameter for tool schemas."""
    if config.use_global_directory:
        return 'This parameter is ignored when using --claude flag. Global directory is used automatically.'
    
    return (
        'The full absolute path to the working directory where data is stored. '
        'MUST be an absolute path, never relative. '
        'Windows: "C:\\Users\\username\\project" or "D:\\projects\\my-app". '
        'Unix/Linux/macOS: "/home/username/project" or "/Users/username/project". '
        'Do NOT use: ".", "..", "~", "./folder", "../folder" or any relative paths. '
        'Ensure the path exists and is accessible before calling this tool.'
    )
