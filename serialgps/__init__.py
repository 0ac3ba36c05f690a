"""Streaming NMEA 0183 decoder for serial GPS receivers."""

from serialgps.errors import (
    AcquisitionCancelled,
    DataTimeoutError,
    DateFormatError,
    FrameError,
    GPSError,
    TransportError,
)
from serialgps.gps import (
    AcquisitionPolicy,
    FixFrame,
    FixRecord,
    FixSnapshot,
    GPSDecoder,
    SerialGPS,
    StreamByteSource,
)
from serialgps.nmea import (
    FieldUpdate,
    SatelliteSlot,
    SentenceType,
    classify,
    parse_date_time,
    parse_sentence,
)

__all__ = [
    "AcquisitionCancelled",
    "AcquisitionPolicy",
    "DataTimeoutError",
    "DateFormatError",
    "FieldUpdate",
    "FixFrame",
    "FixRecord",
    "FixSnapshot",
    "FrameError",
    "GPSDecoder",
    "GPSError",
    "SatelliteSlot",
    "SentenceType",
    "SerialGPS",
    "StreamByteSource",
    "TransportError",
    "classify",
    "parse_date_time",
    "parse_sentence",
]
