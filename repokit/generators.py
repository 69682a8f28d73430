"""
Deterministic identifier generators.

Each generator is a zero-argument callable returning the next value of a
sequence, so a repository seeded with one produces predictable identifiers
for assertions. Counters are guarded by a lock: two threads never receive the
same value.
"""

from threading import Lock
from typing import Callable, Optional, TypeVar
from uuid import UUID

from .config import settings
from .exceptions import InvalidArgumentException

T = TypeVar("T")

_MASK_64 = (1 << 64) - 1


class _Counter:
    """Thread-safe incrementing counter, returns the value before incrementing."""

    def __init__(self, initial: int) -> None:
        self._next = initial
        self._lock = Lock()

    def get_and_increment(self) -> int:
        with self._lock:
            value = self._next
            self._next += 1
            return value


class NumberGenerator:
    """Yields initial, initial + 1, initial + 2, ..."""

    def __init__(self, initial: int = 0) -> None:
        self._counter = _Counter(initial)

    def __call__(self) -> int:
        return self._counter.get_and_increment()


class UUIDGenerator:
    """Yields UUIDs with a fixed upper half and an incrementing lower half."""

    def __init__(self, most: int = 0, least: int = 0) -> None:
        self._most = most & _MASK_64
        self._counter = _Counter(least)

    def __call__(self) -> UUID:
        least = self._counter.get_and_increment() & _MASK_64
        return UUID(int=(self._most << 64) | least)


class StringGenerator:
    """Yields fixed-width base-26 strings: AAAAAA, AAAAAB, ..."""

    def __init__(self, initial: int = 0, length: Optional[int] = None) -> None:
        self._counter = _Counter(initial)
        self.length = length if length is not None else settings.DEFAULT_STRING_LENGTH

    def __call__(self) -> str:
        return base26_encode(self._counter.get_and_increment(), self.length)


def number(initial: int = 0) -> NumberGenerator:
    return NumberGenerator(initial)


def uuid(most: int = 0, least: int = 0) -> UUIDGenerator:
    return UUIDGenerator(most, least)


def string(initial: int = 0, length: Optional[int] = None) -> StringGenerator:
    return StringGenerator(initial, length)


def noop() -> Callable[[], Optional[T]]:
    """A generator that is always exhausted."""

    def generate() -> Optional[T]:
        return None

    return generate


def base26_encode(value: int, length: int) -> str:
    """
    Encode a non-negative integer as exactly `length` letters A-Z.

    The most significant digit comes first and A is zero, so
    base26_encode(0, 5) == "AAAAA" and base26_encode(1882010, 5) == "EDCBA".

    Args:
        value: Value to encode
        length: Number of digits in the result

    Returns:
        Zero-padded base-26 string

    Raises:
        InvalidArgumentException: If value does not fit in `length` digits
    """
    if value < 0:
        raise InvalidArgumentException(
            f"Value {value} must not be negative", details={"value": value}
        )
    if value >= 26**length:
        raise InvalidArgumentException(
            f"Value {value} is too large to express as {length} base26 digits",
            details={"value": value, "length": length},
        )

    digits = []
    remaining = value
    for _ in range(length):
        remaining, digit = divmod(remaining, 26)
        digits.append(chr(ord("A") + digit))
    return "".join(reversed(digits))
