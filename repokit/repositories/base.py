"""
Repository contract.

Repository declares the full read/write surface of an ID-keyed entity store.
Subclasses implement the small canonical set of abstract methods; the batch,
flush and deprecated variants are defined here once as pass-throughs.

Query-by-example, sorting and paging are part of the contract but are NOT
honoured by the stores in this package: every such entry point returns the
unfiltered, unsorted, unpaged result. Callers rely on that behaviour, so
implementations must keep it.
"""

import warnings
from abc import ABC, abstractmethod
from typing import Generic, Iterable, List, Optional, TypeVar

from ..domain.query import Example, Page, PageRequest, Sort
from ..exceptions import EntityNotFoundException

T = TypeVar("T")
ID = TypeVar("ID")


class Repository(ABC, Generic[T, ID]):
    """Base repository interface."""

    # Canonical operations

    @abstractmethod
    def save(self, entity: T) -> T:
        """
        Save an entity (create or update).

        Use the returned instance afterwards: saving may assign an identifier
        and so replace the entity.

        Raises:
            InvalidArgumentException: If no identifier can be established
        """

    @abstractmethod
    def find_by_id(self, entity_id: ID) -> Optional[T]:
        """Get entity by ID, None when absent."""

    @abstractmethod
    def find_all(self, sort: Optional[Sort] = None) -> List[T]:
        """
        Get all entities.

        The sort is accepted and ignored; results are always unsorted.
        """

    @abstractmethod
    def count(self) -> int:
        """Number of stored entities."""

    @abstractmethod
    def delete_by_id(self, entity_id: ID) -> None:
        """Delete the entity with the given ID; absent IDs are ignored."""

    @abstractmethod
    def delete_all(self, entities: Optional[Iterable[T]] = None) -> None:
        """Delete the given entities, or every entity when none are given."""

    @abstractmethod
    def id_of(self, entity: T) -> Optional[ID]:
        """Extract the identifier of an entity."""

    # Derived operations

    def save_all(self, entities: Iterable[T]) -> List[T]:
        """
        Save entities in iteration order.

        A failing save does not undo the saves before it.
        """
        return [self.save(entity) for entity in entities]

    def exists_by_id(self, entity_id: ID) -> bool:
        return self.find_by_id(entity_id) is not None

    def find_all_by_id(self, ids: Iterable[ID]) -> List[T]:
        """
        Get the entities for the given IDs.

        Missing IDs are skipped, so the result may be shorter than `ids`.
        """
        found = []
        for entity_id in ids:
            entity = self.find_by_id(entity_id)
            if entity is not None:
                found.append(entity)
        return found

    def delete(self, entity: T) -> None:
        """Delete an entity by its extracted identifier."""
        entity_id = self.id_of(entity)
        if entity_id is not None:
            self.delete_by_id(entity_id)

    def delete_all_by_id(self, ids: Iterable[ID]) -> None:
        for entity_id in ids:
            self.delete_by_id(entity_id)

    def get_reference_by_id(self, entity_id: ID) -> T:
        """
        Get the entity with the given ID.

        Raises:
            EntityNotFoundException: If no entity is stored under the ID
        """
        entity = self.find_by_id(entity_id)
        if entity is None:
            raise EntityNotFoundException(entity_id)
        return entity

    # Paging: the page request is ignored

    def find_all_paged(self, pageable: PageRequest) -> Page[T]:
        """Return one page holding every entity; `pageable` is ignored."""
        return Page.of(self.find_all())

    # Query by example: the example is ignored

    def find_one(self, example: Example) -> Optional[T]:
        """Return the first entity encountered, None when empty; `example` is ignored."""
        entities = self.find_all()
        return entities[0] if entities else None

    def find_all_by_example(self, example: Example, sort: Optional[Sort] = None) -> List[T]:
        """Return every entity; `example` and `sort` are ignored."""
        return self.find_all(sort)

    def find_all_by_example_paged(self, example: Example, pageable: PageRequest) -> Page[T]:
        """Return one page holding every entity; `example` and `pageable` are ignored."""
        return self.find_all_paged(pageable)

    def count_by_example(self, example: Example) -> int:
        """Return the total count; `example` is ignored."""
        return self.count()

    def exists(self, example: Example) -> bool:
        """Return whether any entity is stored; `example` is ignored."""
        return self.count() > 0

    # Flush and batch: no extra durability, same as the plain operation

    def flush(self) -> None:
        """No-op: there is nothing pending to write."""

    def save_and_flush(self, entity: T) -> T:
        return self.save(entity)

    def save_all_and_flush(self, entities: Iterable[T]) -> List[T]:
        return self.save_all(entities)

    def delete_all_in_batch(self, entities: Optional[Iterable[T]] = None) -> None:
        self.delete_all(entities)

    def delete_all_by_id_in_batch(self, ids: Iterable[ID]) -> None:
        self.delete_all_by_id(ids)

    # Deprecated aliases

    def delete_in_batch(self, entities: Iterable[T]) -> None:
        warnings.warn(
            "delete_in_batch() is deprecated, use delete_all_in_batch()",
            DeprecationWarning,
            stacklevel=2,
        )
        self.delete_all_in_batch(entities)

    def get_one(self, entity_id: ID) -> T:
        warnings.warn(
            "get_one() is deprecated, use get_reference_by_id()",
            DeprecationWarning,
            stacklevel=2,
        )
        return self.get_reference_by_id(entity_id)

    def get_by_id(self, entity_id: ID) -> T:
        warnings.warn(
            "get_by_id() is deprecated, use get_reference_by_id()",
            DeprecationWarning,
            stacklevel=2,
        )
        return self.get_reference_by_id(entity_id)
