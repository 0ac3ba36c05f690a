"""Exception hierarchy for the GPS decoder.

Only transport and acquisition-budget errors cross the decoder boundary.
Sentence-level problems degrade to partial updates inside the parsers and
never raise.

Hierarchy:
    GPSError
    ├── TransportError        byte source timed out, closed, or failed
    ├── FrameError            garbled line; recovered silently by the reader
    ├── DataTimeoutError      read budget exhausted without GGA and RMC
    ├── DateFormatError       composed date/time does not parse
    └── AcquisitionCancelled  cancellation token set during acquisition or reading
"""

__all__ = [
    "AcquisitionCancelled",
    "DataTimeoutError",
    "DateFormatError",
    "FrameError",
    "GPSError",
    "TransportError",
]


class GPSError(Exception):
    """Base class for every error raised by serialgps."""


class TransportError(GPSError):
    """The byte source yielded no byte (timeout, end of stream, I/O failure)."""


class FrameError(GPSError):
    """A candidate line was discarded (no leading ``$`` or overlong)."""


class DataTimeoutError(GPSError):
    """The acquisition read budget ran out before a usable fix was seen."""


class DateFormatError(GPSError, ValueError):
    """The composed ``DDMMYY HHMMSS UTC`` string is not a valid timestamp."""


class AcquisitionCancelled(GPSError):
    """Acquisition stopped because its cancellation token was set."""
