"""HDT sentence parser.

HDT (Heading, True):
    $GPHDT,274.07,T*03
           |      |
           |      +-- T = true (not stored)
           +-- Heading in degrees
"""

from serialgps.nmea.fields import FieldQueue
from serialgps.nmea.types import FieldUpdate


def parse_hdt(fields: list[str]) -> FieldUpdate:
    update = FieldUpdate()
    update.put("heading", FieldQueue(fields).shift())
    return update
