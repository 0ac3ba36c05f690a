"""Print live GPS data to the console.

Usage::

    gpsdump /dev/ttyUSB0

Example output::

    Time: Apr 20 11:44 AM	Satellites: 5		Quality: 1
    Latitude: 4124.8963N	Longitude: 08151.6838W	Elevation: 35.7M
    -- Satellites --
    04: Elevation: 40	Azimuth: 083

The summary is rewritten in place after every sentence. Errors are printed
on a single line and overwritten by the next successful frame.
"""

import logging
import os
import sys
from collections.abc import Sequence
from typing import TextIO

from serialgps.errors import DateFormatError, GPSError
from serialgps.gps import FixFrame, FixSnapshot, SerialGPS

_USAGE = "USAGE gpsdump <Serial Device>\nExample: gpsdump /dev/ttyUSB0"
_TIME_FORMAT = "%b %d %I:%M %p"
_LOG_LEVEL_ENV = "SERIALGPS_LOG_LEVEL"

# ANSI: move the cursor up N lines to column 1, then erase to end of screen
_ERASE_LINES = "\x1b[{}F\x1b[J"


def _format_time(snapshot: FixSnapshot) -> str:
    try:
        timestamp = snapshot.date_time()
    except DateFormatError:
        return ""
    if timestamp is None:
        return ""
    return timestamp.strftime(_TIME_FORMAT)


def format_fix(snapshot: FixSnapshot) -> list[str]:
    """Render a fix summary as display lines."""
    get = snapshot.get
    lines = [
        f"Time: {_format_time(snapshot)}\t"
        f"Satellites: {get('num_sat', '')}\t\tQuality: {get('quality', '')}",
        f"Latitude: {get('latitude', '')}{get('lat_ref', '')}\t"
        f"Longitude: {get('longitude', '')}{get('long_ref', '')}\t"
        f"Elevation: {get('altitude', '')}{get('alt_unit', '')}",
        "-- Satellites --",
    ]
    for slot in snapshot.satellites:
        if slot.is_empty():
            continue
        lines.append(
            f"{slot.id or '--'}: Elevation: {slot.elevation or ''}\t"
            f"Azimuth: {slot.azimuth or ''}"
        )
    return lines


class LiveDisplay:
    """Redraws the latest frame in place on a terminal stream."""

    def __init__(self, out: TextIO) -> None:
        self._out = out
        self._rows = 0

    def _clear(self) -> None:
        if self._rows > 0:
            self._out.write(_ERASE_LINES.format(self._rows))
            self._rows = 0

    def render(self, frame: FixFrame) -> None:
        self._clear()
        if frame.snapshot is not None:
            lines = format_fix(frame.snapshot)
        else:
            lines = [f"Error: {frame.error}"]
        for line in lines:
            self._out.write(line + "\n")
        self._rows = len(lines)
        self._out.flush()


def _configure_logging() -> None:
    level = os.environ.get(_LOG_LEVEL_ENV, "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point of the ``gpsdump`` console script.

    Args:
        argv: Arguments without the program name (default: ``sys.argv[1:]``).

    Returns:
        Process exit status.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print(_USAGE)
        return 0

    _configure_logging()
    device = args[0]
    display = LiveDisplay(sys.stdout)
    print("Reading...")
    try:
        with SerialGPS(device) as gps:
            for frame in gps:
                display.render(frame)
    except KeyboardInterrupt:
        return 0
    except GPSError as e:
        print(f"gpsdump: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
