"""NMEA field consumption utilities.

Parsers walk a sentence's fields front to back. Receivers regularly emit
truncated lines, so every parser consumes fields through a ``FieldQueue``
that yields None once the list runs out instead of raising IndexError. A
field that was never sent is then simply omitted from the update.
"""

import re
from collections import deque
from collections.abc import Iterable

# Optional whitespace, optional sign, then at least one digit
_INTEGER_PREFIX = re.compile(r"\s*([+-]?\d+)")


class FieldQueue:
    """Front-consuming view over the data fields of one sentence.

    Example:
        >>> queue = FieldQueue(["123519", "A"])
        >>> queue.shift()
        '123519'
        >>> queue.shift()
        'A'
        >>> queue.shift() is None
        True
    """

    def __init__(self, fields: Iterable[str]) -> None:
        self._fields = deque(fields)

    def shift(self) -> str | None:
        """Remove and return the next field, or None when exhausted."""
        if not self._fields:
            return None
        return self._fields.popleft()

    def skip(self, count: int = 1) -> None:
        """Discard up to *count* fields."""
        for _ in range(count):
            if self.shift() is None:
                return

    def __len__(self) -> int:
        return len(self._fields)


def parse_int_prefix(value: str | None) -> int | None:
    """Convert the leading integer of *value*, tolerating trailing junk.

    Empty or absent text yields None so the field is dropped. Text without
    a numeric prefix yields 0. That zero is a permissive default inherited
    from the receivers' original driver: a corrupted satellite count reads as
    "no satellites" rather than being rejected.

    Args:
        value: Raw field text

    Returns:
        The parsed integer, 0 if there is no numeric prefix, or None if the
        field is empty or absent

    Example:
        >>> parse_int_prefix("08")
        8
        >>> parse_int_prefix("7x")
        7
        >>> parse_int_prefix("abc")
        0
        >>> parse_int_prefix("") is None
        True
    """
    if not value:
        return None
    match = _INTEGER_PREFIX.match(value)
    if match is None:
        return 0
    return int(match.group(1))
