"""ZDA sentence parser.

ZDA (Time and Date):
    $GPZDA,201530.00,04,07,2002,00,00*60
           |         |  |  |    |  |
           |         |  |  |    |  +-- Local zone minutes (same sign as hours)
           |         |  |  |    +-- Local zone hours (-13 to +13)
           |         |  |  +-- Year (four digits)
           |         |  +-- Month
           |         +-- Day
           +-- UTC time

Day, month and year are folded into the same DDMMYY ``date`` field that RMC
reports, so either sentence can complete a timestamp. A four-digit year keeps
its last two digits ("2002" -> "02"); the century is restored by
``serialgps.nmea.timestamp``.
"""

from serialgps.nmea.fields import FieldQueue
from serialgps.nmea.types import FieldUpdate

_SHORT_YEAR_LENGTH = 2


def compose_date(
    day: str | None,
    month: str | None,
    year: str | None,
) -> str | None:
    """Build a DDMMYY date, or None if any component is missing.

    Example:
        >>> compose_date("04", "07", "2002")
        '040702'
        >>> compose_date("04", "", "2002") is None
        True
    """
    if not day or not month or not year:
        return None
    if len(year) > _SHORT_YEAR_LENGTH:
        year = year[-_SHORT_YEAR_LENGTH:]
    return f"{day}{month}{year}"


def parse_zda(fields: list[str]) -> FieldUpdate:
    """Parse the data fields of a ZDA sentence.

    Args:
        fields: Data fields after the type field, checksum removed

    Returns:
        FieldUpdate with ``time``, the composed ``date`` and the local zone
        offsets
    """
    queue = FieldQueue(fields)
    update = FieldUpdate()
    update.put("time", queue.shift())
    day = queue.shift()
    month = queue.shift()
    year = queue.shift()
    update.put("date", compose_date(day, month, year))
    update.put("local_hour_offset", queue.shift())
    update.put("local_minute_offset", queue.shift())
    return update
