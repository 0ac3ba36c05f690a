"""GSV sentence parser.

GSV (GNSS Satellites in View) spreads the visible satellites over up to four
messages per talker cycle, four satellites per message:

    $GPGSV,2,1,08,01,40,083,46,02,17,308,41,12,07,344,39,14,22,228,45*75
           | | |  |  |  |   |
           | | |  +--+--+---+-- satellite block: PRN, elevation, azimuth, SNR
           | | +-- Satellites in view (num_sat, int)
           | +-- Message number (msg_num, 1-based)
           +-- Total messages in this cycle (msg_count)

Only elevation, azimuth and SNR are stored. A blank attribute (typically the
SNR of a satellite that lost lock) clears the stored value; a block cut off
by a truncated sentence leaves its slot alone. Message N fills slots
(N - 1) * 4 through (N - 1) * 4 + 3, so a full cycle covers 16 slots. These
slots are positional: they are not matched against the IDs reported by GSA.
"""

from serialgps.nmea.fields import FieldQueue, parse_int_prefix
from serialgps.nmea.types import FieldUpdate, SatelliteSlot

SATELLITES_PER_MESSAGE = 4
MAX_MESSAGES = 4
_SATELLITE_ATTRIBUTES = ("elevation", "azimuth", "snr")


def _slot_base(msg_num: str | None) -> int | None:
    """First slot index for a message number, None if out of range.

    A missing or unreadable message number is treated as message 1.
    """
    number = parse_int_prefix(msg_num) or 1
    if number < 1 or number > MAX_MESSAGES:
        return None
    return (number - 1) * SATELLITES_PER_MESSAGE


def parse_gsv(fields: list[str]) -> FieldUpdate:
    """Parse the data fields of a GSV sentence.

    Args:
        fields: Data fields after the type field, checksum removed

    Returns:
        FieldUpdate with message counters, ``num_sat``, and up to four
        partial satellite slots. Blank attributes are listed in
        ``cleared_attributes``. Messages numbered above four update the
        counters only.
    """
    queue = FieldQueue(fields)
    update = FieldUpdate()
    msg_count = queue.shift()
    msg_num = queue.shift()
    update.put("msg_count", msg_count)
    update.put("msg_num", msg_num)
    update.put("num_sat", parse_int_prefix(queue.shift()))

    base = _slot_base(msg_num)
    for offset in range(SATELLITES_PER_MESSAGE):
        queue.skip()  # PRN, not stored
        reported = {name: queue.shift() for name in _SATELLITE_ATTRIBUTES}
        if base is None:
            continue
        index = base + offset
        present = {name: value for name, value in reported.items() if value}
        update.put_satellite(index, SatelliteSlot(**present))
        update.clear_satellite(
            index, *(name for name, value in reported.items() if value == "")
        )
    return update
