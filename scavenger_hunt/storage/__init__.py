"""
Storage package for the Scavenger Hunt tracker.

Contains the key-value stores hunt state is persisted through.
"""

from .key_value import FileStore, KeyValueStore, MemoryStore

__all__ = [
    'FileStore',
    'KeyValueStore',
    'MemoryStore'
]
