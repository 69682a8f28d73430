"""
Repository layer - ID-keyed entity stores.

Repository is the contract; InMemoryRepository is the dictionary-backed store
used in place of a database during tests.
"""

from .base import Repository
from .memory_repository import InMemoryRepository

__all__ = ["InMemoryRepository", "Repository"]
