"""GSA sentence parser.

GSA (GNSS DOP and Active Satellites):
    $GPGSA,A,3,04,05,,09,12,,,24,,,,,2.5,1.3,2.1*39
           | | |                       | |   |   |
           | | |                       | |   |   +-- VDOP
           | | |                       | |   +-- HDOP
           | | |                       | +-- PDOP
           | | +-----------------------+-- 12 satellite ID slots (PRN)
           | +-- Fix dimension (1 = none, 2 = 2D, 3 = 3D)
           +-- Mode (M = manual, A = automatic 2D/3D)

An empty ID slot means "no satellite in this slot", so the stored ID at that
index is cleared. The other slot attributes come from GSV and are left alone.
"""

from serialgps.nmea.fields import FieldQueue
from serialgps.nmea.types import FieldUpdate, SatelliteSlot

SATELLITE_ID_SLOTS = 12


def parse_gsa(fields: list[str]) -> FieldUpdate:
    """Parse the data fields of a GSA sentence.

    Args:
        fields: Data fields after the type field, checksum removed

    Returns:
        FieldUpdate with mode, DOP values, satellite IDs in ``satellites``
        and the indices of empty ID slots in ``cleared_attributes``
    """
    queue = FieldQueue(fields)
    update = FieldUpdate()
    update.put("mode", queue.shift())
    update.put("mode_dimension", queue.shift())

    for index in range(SATELLITE_ID_SLOTS):
        satellite_id = queue.shift()
        if satellite_id is None:
            continue
        if satellite_id == "":
            update.clear_satellite(index, "id")
        else:
            update.put_satellite(index, SatelliteSlot(id=satellite_id))

    update.put("pdop", queue.shift())
    update.put("hdop", queue.shift())
    update.put("vdop", queue.shift())
    return update
