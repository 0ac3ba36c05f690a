"""RMC sentence parser.

RMC (Recommended Minimum Specific GNSS Data) is the only common sentence
that carries the UTC date, so it is required before a timestamp can be built.

RMC Sentence Format:
    $GPRMC,123519,A,4807.038,N,01131.000,E,022.4,084.4,230394,003.1,W*6A
           |      | |        | |         | |     |     |      |     |
           |      | |        | |         | |     |     |      +-----+-- Magnetic variation + E/W
           |      | |        | |         | |     |     +-- Date (DDMMYY)
           |      | |        | |         | |     +-- Course over ground (degrees true)
           |      | |        | |         | +-- Speed over ground (knots)
           |      | +--------+-+---------+-- Latitude + N/S, longitude + E/W
           |      +-- Validity (A = ok, V = warning)
           +-- UTC time
"""

from serialgps.nmea.fields import FieldQueue
from serialgps.nmea.types import FieldUpdate


def parse_rmc(fields: list[str]) -> FieldUpdate:
    """Parse the data fields of an RMC sentence.

    Truncated sentences are common on a noisy line; fields beyond the end of
    the list are omitted.

    Args:
        fields: Data fields after the type field, checksum removed

    Returns:
        FieldUpdate with every non-empty RMC field that was present
    """
    queue = FieldQueue(fields)
    update = FieldUpdate()
    update.put("time", queue.shift())
    update.put("validity", queue.shift())
    update.put("latitude", queue.shift())
    update.put("lat_ref", queue.shift())
    update.put("longitude", queue.shift())
    update.put("long_ref", queue.shift())
    update.put("speed", queue.shift())
    update.put("course", queue.shift())
    update.put("date", queue.shift())
    update.put("variation", queue.shift())
    update.put("var_direction", queue.shift())
    return update
