"""NMEA data types shared by the classifier, the parsers, and the accumulator.

Design Decisions:
    1. Raw string values: every field except ``num_sat`` is stored as the
       text the receiver sent (e.g. latitude "4807.038", not 48.1173). The
       accumulator is a faithful record of the stream; unit conversion is a
       consumer concern.

    2. Absent, never empty: a ``FieldUpdate`` only carries fields whose
       source text was non-empty. "Not reported this cycle" therefore never
       overwrites a value reported earlier.

    3. Positional satellite slots: GSA and GSV both address satellites by
       slot index. GSA slot i and GSV slot i are NOT guaranteed to describe
       the same physical satellite; GSV carries no ID that would allow
       correlation. The positional semantics are kept as-is.
"""

import enum
from dataclasses import dataclass, field, fields, replace


class SentenceType(enum.Enum):
    """Sentence type code found after the ``$`` marker and the talker ID."""

    GGA = "GGA"
    RMC = "RMC"
    GLL = "GLL"
    RMA = "RMA"
    GSA = "GSA"
    GSV = "GSV"
    HDT = "HDT"
    ZDA = "ZDA"
    UNKNOWN = "UNKNOWN"

    @classmethod
    def from_code(cls, code: str) -> "SentenceType":
        """Map a 3-letter code to a member, ``UNKNOWN`` for anything else.

        Example:
            >>> SentenceType.from_code("GGA")
            <SentenceType.GGA: 'GGA'>
            >>> SentenceType.from_code("VTG")
            <SentenceType.UNKNOWN: 'UNKNOWN'>
        """
        if not code or code == cls.UNKNOWN.value:
            return cls.UNKNOWN
        try:
            return cls(code)
        except ValueError:
            return cls.UNKNOWN


@dataclass(frozen=True)
class SatelliteSlot:
    """One positional satellite entry.

    Attributes:
        id: Satellite PRN, populated by GSA. None if not reported.
        elevation: Elevation in degrees (0-90), populated by GSV.
        azimuth: Azimuth in degrees (0-359), populated by GSV.
        snr: Signal-to-noise ratio in dB-Hz, populated by GSV. Empty when the
            satellite is not being tracked, in which case it stays None.
    """

    id: str | None = None
    elevation: str | None = None
    azimuth: str | None = None
    snr: str | None = None

    def merged(self, other: "SatelliteSlot") -> "SatelliteSlot":
        """Return a copy with every non-None attribute of *other* applied."""
        changes = {
            f.name: getattr(other, f.name)
            for f in fields(other)
            if getattr(other, f.name) is not None
        }
        return replace(self, **changes)

    def is_empty(self) -> bool:
        return all(getattr(self, f.name) is None for f in fields(self))

    def to_dict(self) -> dict[str, str]:
        """Present attributes only, for JSON output."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }


@dataclass
class FieldUpdate:
    """The typed key/value updates produced by one parser invocation.

    Attributes:
        fields: Semantic field name to value. Values are strings, except
            ``num_sat`` which is an int.
        satellites: Slot index to a partial slot whose non-None attributes
            overwrite the stored slot.
        cleared_attributes: Slot index to the attribute names the sentence
            reported blank (an empty GSA ID slot, a GSV SNR once lock is
            lost). The accumulator resets these to None; attributes the
            sentence did not reach at all are left alone.
    """

    fields: dict[str, str | int] = field(default_factory=dict)
    satellites: dict[int, SatelliteSlot] = field(default_factory=dict)
    cleared_attributes: dict[int, set[str]] = field(default_factory=dict)

    def put(self, name: str, value: str | int | None) -> None:
        """Store *value* unless it is absent or an empty string."""
        if value is None or value == "":
            return
        self.fields[name] = value

    def put_satellite(self, index: int, slot: SatelliteSlot) -> None:
        """Store a partial slot unless every attribute is absent."""
        if slot.is_empty():
            return
        self.satellites[index] = slot

    def clear_satellite(self, index: int, *names: str) -> None:
        """Mark slot attributes that were reported blank."""
        if names:
            self.cleared_attributes.setdefault(index, set()).update(names)

    def __bool__(self) -> bool:
        return bool(self.fields or self.satellites or self.cleared_attributes)
