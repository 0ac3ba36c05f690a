"""GPS module: frame reading, fix accumulation and acquisition over a byte source."""

from serialgps.gps.accumulator import FixRecord
from serialgps.gps.acquisition import AcquisitionPolicy, Failed, Satisfied
from serialgps.gps.reader import GPSDecoder, SerialGPS
from serialgps.gps.source import ByteSource, SerialByteSource, StreamByteSource
from serialgps.gps.types import FixFrame, FixSnapshot

__all__ = [
    "AcquisitionPolicy",
    "ByteSource",
    "Failed",
    "FixFrame",
    "FixRecord",
    "FixSnapshot",
    "GPSDecoder",
    "Satisfied",
    "SerialByteSource",
    "SerialGPS",
    "StreamByteSource",
]
