"""
repokit - in-memory repositories and deterministic helpers for tests.

Stand in for a database-backed repository with InMemoryRepository, seed it
with predictable identifiers from the generators module, and pin time and
randomness with FixedClock and SteppingRandom.
"""

from . import generators
from .dated import DatedTest, FixedClock, JsonCodec
from .domain.query import Direction, Example, Order, Page, PageRequest, Sort
from .exceptions import EntityNotFoundException, InvalidArgumentException, RepoKitException
from .repositories import InMemoryRepository, Repository
from .stepping import SteppingRandom

__version__ = "0.1.0"

__all__ = [
    "DatedTest",
    "Direction",
    "EntityNotFoundException",
    "Example",
    "FixedClock",
    "InMemoryRepository",
    "InvalidArgumentException",
    "JsonCodec",
    "Order",
    "Page",
    "PageRequest",
    "RepoKitException",
    "Repository",
    "Sort",
    "SteppingRandom",
    "generators",
]
