"""
Fixed clock and JSON codec for date-sensitive tests.

Tests that stamp entities with the current time get a clock that never moves,
and a codec that writes dates as ISO-8601 strings so expected JSON can be
written by hand.
"""

from datetime import date, datetime, timezone, tzinfo
from typing import Any, Optional, Type

from pydantic import TypeAdapter
from pydantic_core import to_json

from .config import settings


class FixedClock:
    """
    Clock that always reports the same instant.

    Attributes:
        instant: Timezone-aware instant returned by now()
    """

    def __init__(self, instant: Optional[datetime] = None) -> None:
        instant = instant or settings.FIXED_CLOCK_INSTANT
        if instant.tzinfo is None:
            instant = instant.replace(tzinfo=timezone.utc)
        self.instant = instant

    @property
    def tz(self) -> tzinfo:
        return self.instant.tzinfo  # type: ignore[return-value]

    def now(self, tz: Optional[tzinfo] = None) -> datetime:
        """The fixed instant, converted to `tz` when given."""
        if tz is None:
            return self.instant
        return self.instant.astimezone(tz)

    def today(self) -> date:
        return self.instant.date()

    def timestamp(self) -> float:
        return self.instant.timestamp()

    def __call__(self) -> datetime:
        return self.now()

    def __repr__(self) -> str:
        return f"FixedClock({self.instant.isoformat()})"


class JsonCodec:
    """
    JSON encoder/decoder.

    Dates, datetimes and times are written as ISO-8601 strings, decimals and
    UUIDs as strings. Decoding validates in lax mode, so "2000-06-15" is
    accepted where a date is expected and "42" where an int is.
    """

    def __init__(self, indent: Optional[int] = None) -> None:
        self.indent = indent

    def dumps(self, value: Any) -> str:
        return to_json(value, indent=self.indent).decode("utf-8")

    def loads(self, data: Any, type_: Type[Any] = Any) -> Any:
        """
        Decode JSON text into `type_`.

        Args:
            data: JSON string or bytes
            type_: Target type, plain JSON values when omitted

        Returns:
            Decoded value

        Raises:
            pydantic.ValidationError: If the JSON does not fit `type_`
        """
        return TypeAdapter(type_).validate_json(data)


class DatedTest:
    """
    Base class for test classes that need a fixed clock and a JSON codec.

    The clock reads 2000-06-15T12:30:00Z unless REPOKIT_FIXED_CLOCK_INSTANT
    says otherwise.
    """

    _clock: Optional[FixedClock] = None
    _json_codec: Optional[JsonCodec] = None

    @property
    def clock(self) -> FixedClock:
        if self._clock is None:
            self._clock = FixedClock()
        return self._clock

    @property
    def json_codec(self) -> JsonCodec:
        if self._json_codec is None:
            self._json_codec = JsonCodec()
        return self._json_codec
