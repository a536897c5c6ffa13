"""Exception types raised across the package."""


class AgenticToolsError(Exception):
    """Base class for all package errors."""


class TaskNotFoundError(AgenticToolsError):
    """Raised when a requested task does not exist in storage."""
    
    def __init__(self, task_id: str):
        super().__init__(f'Task with ID "{task_id}" not found.')
        self.task_id = task_id


class StorageError(AgenticToolsError):
    """Raised when the backing files cannot be read or written."""


class WorkingDirectoryError(AgenticToolsError, ValueError):
    """Raised when no usable working directory can be resolved."""
