"""
Test configuration and fixtures
"""

import pytest
from entities import Foo, foo_id, set_foo_id

from repokit import InMemoryRepository, generators


@pytest.fixture
def repository():
    """Repository holding One, Two and Three, generating ids from 4."""
    return InMemoryRepository(
        foo_id,
        set_foo_id,
        generators.number(4),
        [Foo(1, "One"), Foo(2, "Two"), Foo(3, "Three")],
    )


@pytest.fixture
def exhausted_repository():
    """Empty repository whose generator never yields an id."""
    return InMemoryRepository(foo_id, set_foo_id, generators.noop())
