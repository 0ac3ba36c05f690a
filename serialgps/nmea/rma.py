"""RMA sentence parser.

RMA (Recommended Minimum Navigation Information, Loran-C):
    $GPRMA,A,4807.038,N,01131.000,E,,,022.4,084.4,003.1,W*hh
           | |        | |         | | | |     |     |     |
           | |        | |         | | | |     |     +-----+-- Magnetic variation + E/W
           | |        | |         | | | |     +-- Course over ground
           | |        | |         | | | +-- Speed over ground (knots)
           | |        | |         | +-+-- Loran time differences (not used)
           | +--------+-+---------+-- Latitude + N/S, longitude + E/W
           +-- Data status (not used)
"""

from serialgps.nmea.fields import FieldQueue
from serialgps.nmea.types import FieldUpdate

_UNUSED_TIME_DIFFERENCES = 2


def parse_rma(fields: list[str]) -> FieldUpdate:
    """Parse the data fields of an RMA sentence.

    Args:
        fields: Data fields after the type field, checksum removed

    Returns:
        FieldUpdate with position, speed, course, and variation
    """
    queue = FieldQueue(fields)
    update = FieldUpdate()
    queue.skip()  # data status
    update.put("latitude", queue.shift())
    update.put("lat_ref", queue.shift())
    update.put("longitude", queue.shift())
    update.put("long_ref", queue.shift())
    queue.skip(_UNUSED_TIME_DIFFERENCES)
    update.put("speed", queue.shift())
    update.put("course", queue.shift())
    update.put("variation", queue.shift())
    update.put("var_direction", queue.shift())
    return update
