"""
Stepped pseudo-random number generator.

SteppingRandom walks an arithmetic sequence instead of producing random
values, so code that takes a random.Random can be driven deterministically
from tests.
"""

import random
from typing import Optional

from .exceptions import InvalidArgumentException

INT_MAX = 2**31 - 1


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 2**32 if value >= 2**31 else value


def _truncated_remainder(value: int, divisor: int) -> int:
    """Remainder taking the sign of the dividend."""
    remainder = abs(value) % divisor
    return -remainder if value < 0 else remainder


class SteppingRandom(random.Random):
    """
    Random source yielding minimum, minimum + step, ... and wrapping back to
    minimum once the next value would reach maximum.

    next_int(1, 10) over the default sequence yields 1, 1, 2, 2, ..., 9, 9, 1:
    bounded draws reduce consecutive values the same way a real generator
    reduces random bits.

    Attributes:
        minimum: First value of the sequence
        maximum: Exclusive upper bound of the sequence
        step: Increment between values
    """

    def __init__(self, minimum: int = 0, maximum: int = INT_MAX, step: int = 1) -> None:
        if minimum >= maximum:
            raise InvalidArgumentException(
                f"Minimum {minimum} must be less than maximum {maximum}",
                details={"minimum": minimum, "maximum": maximum},
            )
        if step < 1:
            raise InvalidArgumentException(
                f"Step {step} must be positive", details={"step": step}
            )
        self.minimum = minimum
        self.maximum = maximum
        self.step = step
        self._sequence = minimum
        super().__init__()

    def _next(self, bits: int) -> int:
        result = self._sequence
        self._sequence += self.step
        if self._sequence >= self.maximum:
            self._sequence = self.minimum
        return result & ((1 << bits) - 1)

    def next_int(self, origin: Optional[int] = None, bound: Optional[int] = None) -> int:
        """
        Next value of the sequence, optionally reduced into a range.

        next_int() returns the raw value, next_int(bound) a value in
        [0, bound) and next_int(origin, bound) a value in [origin, bound).
        """
        if origin is None:
            return _to_int32(self._next(32))
        if bound is None:
            return self._next_below(origin)
        return self._next_between(origin, bound)

    def _next_below(self, bound: int) -> int:
        if bound <= 0:
            raise InvalidArgumentException(
                f"Bound {bound} must be positive", details={"bound": bound}
            )
        r = self._next(31)
        m = bound - 1
        if bound & m == 0:
            return (bound * r) >> 31
        u = r
        r = u % bound
        while _to_int32(u - r + m) < 0:
            u = self._next(31)
            r = u % bound
        return r

    def _next_between(self, origin: int, bound: int) -> int:
        if origin >= bound:
            raise InvalidArgumentException(
                f"Origin {origin} must be less than bound {bound}",
                details={"origin": origin, "bound": bound},
            )
        r = self.next_int()
        n = _to_int32(bound - origin)
        m = n - 1
        if n > 0 and n & m == 0:
            return (r & m) + origin
        if n > 0:
            u = (r & 0xFFFFFFFF) >> 1
            r = u % n
            while _to_int32(u + m - r) < 0:
                u = (self.next_int() & 0xFFFFFFFF) >> 1
                r = u % n
            return r + origin
        while r < origin or r >= bound:
            r = self.next_int()
        return r

    def next_long(self) -> int:
        return self.next_int()

    def next_boolean(self) -> bool:
        return self._next(1) != 0

    def next_float(self) -> float:
        """Last decimal digit of the next value, as a tenth: 0.0, 0.1, ..., 0.9."""
        return _truncated_remainder(self.next_int(), 10) / 10.0

    def next_double(self) -> float:
        return self.next_float()

    # random.Random hooks: randint(), choice(), shuffle() and friends
    # draw from these.

    def random(self) -> float:
        return self.next_double()

    def getrandbits(self, k: int) -> int:
        if k < 0:
            raise ValueError("number of bits must be non-negative")
        return self._next(k)
