"""
Query value objects for the repository contract.

Sort, PageRequest and Example are carried through the repository API so that
calling code can be written against the full contract. The in-memory store
accepts them and does not interpret them.
"""

from dataclasses import dataclass, field
from enum import Enum
from math import ceil
from typing import Any, Generic, Iterator, List, Optional, Sequence, Tuple, TypeVar

from ..exceptions import InvalidArgumentException

T = TypeVar("T")


class Direction(str, Enum):
    """Sort direction."""

    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class Order:
    """Ordering on a single attribute."""

    attribute: str
    direction: Direction = Direction.ASC


@dataclass(frozen=True)
class Sort:
    """
    Value object describing a sort.

    An empty order tuple means unsorted.
    """

    orders: Tuple[Order, ...] = ()

    @classmethod
    def by(cls, *attributes: str, direction: Direction = Direction.ASC) -> "Sort":
        """Sort by the given attributes, all in the same direction."""
        return cls(tuple(Order(attribute, direction) for attribute in attributes))

    @classmethod
    def unsorted(cls) -> "Sort":
        return cls()

    @property
    def is_sorted(self) -> bool:
        return bool(self.orders)


@dataclass(frozen=True)
class PageRequest:
    """
    Value object describing a page of results.

    Attributes:
        page: Zero-based page index
        size: Page size, None when unpaged
        sort: Sort to apply within the page
    """

    page: int = 0
    size: Optional[int] = None
    sort: Sort = field(default_factory=Sort.unsorted)

    def __post_init__(self):
        """Validate page bounds on creation."""
        if self.page < 0:
            raise InvalidArgumentException(
                "Page index must not be less than zero", details={"page": self.page}
            )
        if self.size is not None and self.size < 1:
            raise InvalidArgumentException(
                "Page size must not be less than one", details={"size": self.size}
            )

    @classmethod
    def of(cls, page: int, size: int, sort: Optional[Sort] = None) -> "PageRequest":
        return cls(page=page, size=size, sort=sort or Sort.unsorted())

    @classmethod
    def unpaged(cls) -> "PageRequest":
        return cls()

    @property
    def is_paged(self) -> bool:
        return self.size is not None

    @property
    def offset(self) -> int:
        return self.page * self.size if self.size is not None else 0


@dataclass(frozen=True)
class Example(Generic[T]):
    """Probe entity used for query-by-example."""

    probe: Any

    @classmethod
    def of(cls, probe: Any) -> "Example":
        return cls(probe=probe)


@dataclass
class Page(Generic[T]):
    """
    A page of results.

    A page built with Page.of() is unpaged: it holds the whole result set,
    reports itself as page 0 and counts as the only page.
    """

    content: List[T]
    pageable: PageRequest = field(default_factory=PageRequest.unpaged)
    total_elements: Optional[int] = None

    def __post_init__(self):
        if self.total_elements is None:
            self.total_elements = len(self.content)

    @classmethod
    def of(cls, content: Sequence[T]) -> "Page[T]":
        return cls(content=list(content))

    @property
    def number(self) -> int:
        return self.pageable.page

    @property
    def size(self) -> int:
        if self.pageable.size is None:
            return len(self.content)
        return self.pageable.size

    @property
    def total_pages(self) -> int:
        if not self.size:
            return 0 if not self.total_elements else 1
        return ceil(self.total_elements / self.size)

    @property
    def number_of_elements(self) -> int:
        return len(self.content)

    def has_content(self) -> bool:
        return bool(self.content)

    def __iter__(self) -> Iterator[T]:
        return iter(self.content)

    def __len__(self) -> int:
        return len(self.content)
