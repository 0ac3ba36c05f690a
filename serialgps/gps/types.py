"""Immutable views of the accumulated fix, handed to readers."""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import Any

from serialgps.errors import GPSError
from serialgps.nmea.timestamp import parse_date_time
from serialgps.nmea.types import SatelliteSlot, SentenceType


@dataclass(frozen=True)
class FixSnapshot:
    """A consistent copy of the fix record at one point in time.

    Field values are the raw strings the receiver sent (``num_sat`` is an
    int). The snapshot holds every field ever observed, not only those of
    the most recent sentence, so a value can be minutes old if its sentence
    type stopped arriving.

    Attributes:
        fields: Read-only mapping of semantic field name to value.
        satellites: Positional satellite slots. GSA slot i and GSV slot i are
            not guaranteed to be the same satellite.
        last_sentence_type: Type of the most recently merged sentence, or
            None before the first merge.
        seen_types: Every sentence type merged so far.

    Example:
        >>> snapshot = gps.get_data()
        >>> snapshot["latitude"], snapshot["lat_ref"]
        ('4807.038', 'N')
        >>> snapshot.get("heading") is None  # no HDT received
        True
    """

    fields: Mapping[str, str | int] = field(
        default_factory=lambda: MappingProxyType({})
    )
    satellites: tuple[SatelliteSlot, ...] = ()
    last_sentence_type: SentenceType | None = None
    seen_types: frozenset[SentenceType] = frozenset()

    def __getitem__(self, name: str) -> str | int:
        return self.fields[name]

    def __contains__(self, name: object) -> bool:
        return name in self.fields

    def __iter__(self) -> Iterator[str]:
        return iter(self.fields)

    def get(self, name: str, default: Any = None) -> Any:
        return self.fields.get(name, default)

    def date_time(self) -> datetime | None:
        """UTC timestamp from the ``time`` and ``date`` fields.

        Returns None if either field is missing.

        Raises:
            DateFormatError: If the fields do not compose to a valid timestamp.
        """
        time = self.fields.get("time")
        date = self.fields.get("date")
        return parse_date_time(
            time if isinstance(time, str) else None,
            date if isinstance(date, str) else None,
        )

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready mapping including ``last_nmea`` and ``satellites``."""
        data: dict[str, Any] = dict(self.fields)
        if self.last_sentence_type is not None:
            data["last_nmea"] = self.last_sentence_type.value
        data["satellites"] = [slot.to_dict() for slot in self.satellites]
        return data


@dataclass(frozen=True)
class FixFrame:
    """One item of the live frame stream: a snapshot or an error.

    Exactly one of ``snapshot`` and ``error`` is set. Errors are recoverable
    (the stream keeps going), so a display can render them in place and
    overwrite them on the next successful frame.
    """

    snapshot: FixSnapshot | None = None
    error: GPSError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None
