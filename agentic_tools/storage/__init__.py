"""Persistence layer."""

from .base import MemoryStorage, Storage
from .file_storage import FileStorage
from .memory_storage import FileMemoryStorage

__all__ = ['Storage', 'MemoryStorage', 'FileStorage', 'FileMemoryStorage']
