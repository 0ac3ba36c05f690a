"""Fix accumulator: merges successive sentence updates into one record.

Merge rules:
    * Plain fields are overwritten by the newest update carrying the same
      name. Values are never combined arithmetically.
    * Satellite slots merge positionally and attribute by attribute, so a
      GSA ID and GSV elevation at the same index coexist.
    * A slot attribute reported blank (empty GSA ID, empty GSV SNR) is reset
      to None. Attributes a truncated sentence never reached are kept.
    * Nothing else is ever cleared. If a sentence type stops
      arriving, its last values remain. This is best-effort staleness, not a
      bug; callers that care should look at ``seen_types`` and timestamps.

The record has a single writer (the decoding loop). Every mutation and every
snapshot happens under a lock, and readers only ever receive immutable
``FixSnapshot`` copies, so a display thread never sees a half-merged record.
"""

import threading
from dataclasses import replace
from datetime import datetime
from types import MappingProxyType

from serialgps.gps.types import FixSnapshot
from serialgps.nmea.types import FieldUpdate, SatelliteSlot, SentenceType

__all__ = ["FixRecord"]


class FixRecord:
    """Long-lived mutable fix record, one per decoder session."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._fields: dict[str, str | int] = {}
        self._satellites: list[SatelliteSlot] = []
        self._last_sentence_type: SentenceType | None = None
        self._seen_types: set[SentenceType] = set()

    def _slot(self, index: int) -> SatelliteSlot:
        while len(self._satellites) <= index:
            self._satellites.append(SatelliteSlot())
        return self._satellites[index]

    def _merge_satellites(self, update: FieldUpdate) -> None:
        for index, names in update.cleared_attributes.items():
            self._satellites[index] = replace(self._slot(index), **dict.fromkeys(names))
        for index, partial in update.satellites.items():
            self._satellites[index] = self._slot(index).merged(partial)

    def merge(self, update: FieldUpdate, sentence_type: SentenceType) -> None:
        """Apply one parser's update and record its sentence type.

        A no-op for ``SentenceType.UNKNOWN``.

        Args:
            update: Output of the parser for *sentence_type*
            sentence_type: Type of the sentence that produced *update*
        """
        if sentence_type is SentenceType.UNKNOWN:
            return
        with self._lock:
            self._fields.update(update.fields)
            self._merge_satellites(update)
            self._seen_types.add(sentence_type)
            self._last_sentence_type = sentence_type

    def snapshot(self) -> FixSnapshot:
        """Return an immutable, internally consistent copy of the record."""
        with self._lock:
            return FixSnapshot(
                fields=MappingProxyType(dict(self._fields)),
                satellites=tuple(self._satellites),
                last_sentence_type=self._last_sentence_type,
                seen_types=frozenset(self._seen_types),
            )

    @property
    def seen_types(self) -> frozenset[SentenceType]:
        with self._lock:
            return frozenset(self._seen_types)

    @property
    def last_sentence_type(self) -> SentenceType | None:
        with self._lock:
            return self._last_sentence_type

    def has_seen(self, *sentence_types: SentenceType) -> bool:
        """True if every given type has been merged at least once."""
        with self._lock:
            return all(t in self._seen_types for t in sentence_types)

    def date_time(self) -> datetime | None:
        """UTC timestamp from the current ``time`` and ``date`` fields.

        Returns None if either field is missing.

        Raises:
            DateFormatError: If the fields do not compose to a valid timestamp.
        """
        return self.snapshot().date_time()
