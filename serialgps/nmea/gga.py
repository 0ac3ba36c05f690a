"""GGA sentence parser.

GGA (Global Positioning System Fix Data) carries the primary fix: position,
fix quality, satellites in use and altitude.

GGA Sentence Format:
    $GPGGA,123519,4807.038,N,01131.000,E,1,08,0.9,545.4,M,46.9,M,,*47
           |      |        | |         | | |  |   |     | |    | ||
           |      |        | |         | | |  |   |     | |    | |+-- DGPS station ID (dgps)
           |      |        | |         | | |  |   |     | |    | +-- Seconds since last DGPS update
           |      |        | |         | | |  |   |     | +----+-- Geoid height + unit
           |      |        | |         | | |  |   +-----+-- Altitude + unit
           |      |        | |         | | |  +-- HDOP
           |      |        | |         | | +-- Satellites in use (num_sat, int)
           |      |        | |         | +-- Fix quality (0 = invalid, 1 = GPS, 2 = DGPS)
           |      |        | +---------+-- Longitude (DDDMM.MMMM) + E/W
           |      +--------+-- Latitude (DDMM.MMMM) + N/S
           +-- UTC time (HHMMSS or HHMMSS.ss)
"""

from serialgps.nmea.fields import FieldQueue, parse_int_prefix
from serialgps.nmea.types import FieldUpdate


def parse_gga(fields: list[str]) -> FieldUpdate:
    """Parse the data fields of a GGA sentence.

    Args:
        fields: Data fields after the type field, checksum removed

    Returns:
        FieldUpdate with every non-empty GGA field that was present

    Example:
        >>> update = parse_gga(["123519", "4807.038", "N"])
        >>> update.fields
        {'time': '123519', 'latitude': '4807.038', 'lat_ref': 'N'}
    """
    queue = FieldQueue(fields)
    update = FieldUpdate()
    update.put("time", queue.shift())
    update.put("latitude", queue.shift())
    update.put("lat_ref", queue.shift())
    update.put("longitude", queue.shift())
    update.put("long_ref", queue.shift())
    update.put("quality", queue.shift())
    update.put("num_sat", parse_int_prefix(queue.shift()))
    update.put("hdop", queue.shift())
    update.put("altitude", queue.shift())
    update.put("alt_unit", queue.shift())
    update.put("height_geoid", queue.shift())
    update.put("height_geoid_unit", queue.shift())
    update.put("last_dgps", queue.shift())
    update.put("dgps", queue.shift())
    return update
