"""Sentence classification.

Turns one raw line into its sentence type and the list of data fields:

    $GPGGA,123519,4807.038,N,01131.000,E,1,08,0.9,545.4,M,46.9,M,,*47
    ^ ^ ^  |
    | | |  +-- data fields start here
    | | +-- sentence type (characters 3-5 of the first field)
    | +-- talker ID (GP), skipped
    +-- start marker

The trailing ``*hh`` checksum is cut off the last field and never verified.
"""

from serialgps.nmea.types import SentenceType

_START_MARKER = "$"
_TYPE_OFFSET = 3
_TYPE_LENGTH = 3
_CHECKSUM_DELIMITER = "*"


def _strip_line_endings(line: str) -> str:
    return line.replace("\r", "").replace("\n", "")


def _strip_checksum(fields: list[str]) -> None:
    """Cut a ``*hh`` suffix off the last field in place."""
    if not fields:
        return
    last = fields[-1]
    if _CHECKSUM_DELIMITER in last:
        fields[-1] = last[: last.index(_CHECKSUM_DELIMITER)]


def classify(line: str | None) -> tuple[SentenceType, list[str]] | None:
    """Classify a raw NMEA line.

    Never raises: malformed input degrades to None or ``UNKNOWN``.

    Args:
        line: Raw sentence text, line endings allowed

    Returns:
        ``(sentence_type, fields)`` where *fields* excludes the
        marker/talker/type field, or None if the line is empty or does not
        start with ``$``. Unrecognised type codes classify as
        ``SentenceType.UNKNOWN``.

    Example:
        >>> classify("$GPHDT,274.07,T*03")
        (<SentenceType.HDT: 'HDT'>, ['274.07', 'T'])
        >>> classify("GPHDT,274.07,T") is None
        True
    """
    if not line:
        return None

    fields = _strip_line_endings(line).split(",")
    if not fields[0].startswith(_START_MARKER):
        return None

    code = fields.pop(0)[_TYPE_OFFSET : _TYPE_OFFSET + _TYPE_LENGTH]
    _strip_checksum(fields)
    return SentenceType.from_code(code), fields
