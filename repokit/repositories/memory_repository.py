"""
In-memory repository.

A dictionary-backed implementation of the Repository contract for tests that
need CRUD semantics without a database. Entities are keyed by the identifier
an extractor function reads from them; entities saved without one get a
fresh identifier from a generator, written back through an injector.
"""

from threading import Lock
from typing import Callable, Iterable, Iterator, List, MutableMapping, Optional, TypeVar

import structlog

from ..domain.query import Example, Sort
from ..exceptions import InvalidArgumentException
from .base import Repository

logger = structlog.get_logger(__name__)

T = TypeVar("T")
ID = TypeVar("ID")

Extractor = Callable[[T], Optional[ID]]
Injector = Callable[[ID, T], Optional[T]]
Generator = Callable[[], Optional[ID]]

NULL_ID_MESSAGE = "Id must not be `null`"


class InMemoryRepository(Repository[T, ID]):
    """
    Thread-safe in-memory repository.

    Every read and write of the backing mapping happens under the instance
    lock. Bulk reads return copies, so callers never see a mapping that is
    being changed underneath them. Saving twice under the same identifier
    overwrites silently: there is no version check.

    Attributes:
        extractor: Reads the identifier from an entity, None when unset
        injector: Assigns a generated identifier. It may mutate the entity
            and return None, or return a new entity carrying the identifier.
        generator: Supplies fresh identifiers, returns None when exhausted
    """

    def __init__(
        self,
        extractor: Extractor,
        injector: Optional[Injector] = None,
        generator: Optional[Generator] = None,
        entities: Iterable[T] = (),
        container: Optional[MutableMapping[ID, T]] = None,
    ) -> None:
        """
        Initialize repository.

        Args:
            extractor: Function reading an entity's identifier
            injector: Function assigning an identifier to an entity
            generator: Supplier of new identifiers
            entities: Initial entities, indexed by extractor (last one wins)
            container: Mapping to store entities in, a new dict by default.
                The repository takes ownership of it.
        """
        self.extractor = extractor
        self.injector = injector
        self.generator = generator
        self._entities: MutableMapping[ID, T] = container if container is not None else {}
        self._lock = Lock()
        self.populate(entities)

    def populate(self, entities: Iterable[T]) -> "InMemoryRepository[T, ID]":
        """
        Merge entities into the store, keyed by their extracted identifier.

        Identifiers are not generated here. Entities must already carry one.

        Returns:
            This repository, for chaining

        Raises:
            InvalidArgumentException: If an entity has no identifier; nothing
                is merged in that case
        """
        indexed = {self.extractor(entity): entity for entity in entities}
        if None in indexed:
            raise InvalidArgumentException(NULL_ID_MESSAGE)
        with self._lock:
            self._entities.update(indexed)
        if indexed:
            logger.debug("Populated repository", count=len(indexed))
        return self

    def id_of(self, entity: T) -> Optional[ID]:
        return self.extractor(entity)

    def save(self, entity: T) -> T:
        """
        Save an entity, generating an identifier if it has none.

        Args:
            entity: Entity to store

        Returns:
            The entity as stored, which carries the generated identifier if
            one was assigned

        Raises:
            InvalidArgumentException: If the entity has no identifier and
                none can be generated or injected
        """
        entity_id = self.extractor(entity)
        if entity_id is None:
            entity_id = self.generator() if self.generator is not None else None
            if entity_id is None or self.injector is None:
                logger.warning(
                    "Cannot establish identifier",
                    has_generator=self.generator is not None,
                    has_injector=self.injector is not None,
                )
                raise InvalidArgumentException(NULL_ID_MESSAGE)
            injected = self.injector(entity_id, entity)
            if injected is not None:
                entity = injected
            logger.debug("Generated identifier", entity_id=entity_id)

        with self._lock:
            self._entities[entity_id] = entity
        logger.debug("Saved entity", entity_id=entity_id)
        return entity

    def find_by_id(self, entity_id: ID) -> Optional[T]:
        with self._lock:
            return self._entities.get(entity_id)

    def exists_by_id(self, entity_id: ID) -> bool:
        with self._lock:
            return entity_id in self._entities

    def find_all(self, sort: Optional[Sort] = None) -> List[T]:
        """
        Snapshot of all entities.

        NOTE: the sort is ignored, the order of the result is undefined.
        """
        with self._lock:
            return list(self._entities.values())

    def find_all_by_id(self, ids: Iterable[ID]) -> List[T]:
        wanted = list(ids)
        with self._lock:
            return [self._entities[i] for i in wanted if i in self._entities]

    def count(self) -> int:
        with self._lock:
            return len(self._entities)

    def find_one(self, example: Example) -> Optional[T]:
        """
        First entity encountered, None when empty.

        NOTE: the example is ignored.
        """
        with self._lock:
            return next(iter(self._entities.values()), None)

    def delete_by_id(self, entity_id: ID) -> None:
        with self._lock:
            removed = self._entities.pop(entity_id, None)
        if removed is not None:
            logger.debug("Deleted entity", entity_id=entity_id)

    def delete_all(self, entities: Optional[Iterable[T]] = None) -> None:
        """
        Delete the given entities, or clear the store when called without any.

        Entities that are not stored are ignored.
        """
        if entities is not None:
            for entity in entities:
                self.delete(entity)
            return

        with self._lock:
            count = len(self._entities)
            self._entities.clear()
        logger.debug("Cleared repository", count=count)

    def __len__(self) -> int:
        return self.count()

    def __contains__(self, entity_id: object) -> bool:
        return self.exists_by_id(entity_id)  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[T]:
        return iter(self.find_all())

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(count={self.count()})"
