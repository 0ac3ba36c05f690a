"""GLL sentence parser.

GLL (Geographic Position - Latitude/Longitude):
    $GPGLL,4916.45,N,12311.12,W,225444,A*31
           |       | |        | |
           |       | |        | +-- UTC time
           +-------+-+--------+-- Latitude + N/S, longitude + E/W

The trailing status field is not stored.
"""

from serialgps.nmea.fields import FieldQueue
from serialgps.nmea.types import FieldUpdate


def parse_gll(fields: list[str]) -> FieldUpdate:
    queue = FieldQueue(fields)
    update = FieldUpdate()
    update.put("latitude", queue.shift())
    update.put("lat_ref", queue.shift())
    update.put("longitude", queue.shift())
    update.put("long_ref", queue.shift())
    update.put("time", queue.shift())
    return update
