"""Byte sources feeding the frame reader.

A byte source delivers one byte per blocking call and returns None when no
byte arrived within its timeout or the stream ended. ``exhausted`` tells the
two apart: a serial port is never exhausted, a replayed file is once it hits
end of file. Two implementations:

* ``SerialByteSource`` opens a serial device with pySerial. Defaults match
  the EM-406A SiRF III class of receivers: 4800 baud, 8N1, 30 s timeout.
* ``StreamByteSource`` wraps any binary file object, for replaying captured
  NMEA logs.
"""

import logging
from typing import BinaryIO, Protocol

import serial

from serialgps.errors import TransportError

__all__ = [
    "DEFAULT_BAUDRATE",
    "DEFAULT_TIMEOUT",
    "ByteSource",
    "SerialByteSource",
    "StreamByteSource",
]

logger = logging.getLogger(__name__)

# --- serial defaults ----------------------------------------------------------

DEFAULT_BAUDRATE = 4800
DEFAULT_TIMEOUT = 30.0  # seconds; a silent receiver surfaces as TransportError

_BYTESIZE = serial.EIGHTBITS
_PARITY = serial.PARITY_NONE
_STOPBITS = serial.STOPBITS_ONE


class ByteSource(Protocol):
    """Blocking single-byte reader with its own read timeout."""

    def read_byte(self) -> int | None:
        """Return the next byte value, or None on timeout or end of stream."""
        ...

    @property
    def exhausted(self) -> bool:
        """True once no further byte can ever arrive."""
        ...

    def close(self) -> None: ...


class SerialByteSource:
    """pySerial-backed byte source.

    Args:
        device: Serial device path, e.g. ``"/dev/ttyUSB0"``.
        baudrate: Line speed (default: 4800).
        timeout: Read timeout in seconds (default: 30.0).
        bytesize: Data bits (default: 8).
        parity: Parity (default: none).
        stopbits: Stop bits (default: 1).

    Raises:
        TransportError: If the device cannot be opened.
    """

    def __init__(
        self,
        device: str,
        baudrate: int = DEFAULT_BAUDRATE,
        timeout: float = DEFAULT_TIMEOUT,
        bytesize: int = _BYTESIZE,
        parity: str = _PARITY,
        stopbits: float = _STOPBITS,
    ) -> None:
        try:
            self._serial = serial.Serial(
                device,
                baudrate=baudrate,
                bytesize=bytesize,
                parity=parity,
                stopbits=stopbits,
                timeout=timeout,
            )
        except (serial.SerialException, ValueError) as e:
            raise TransportError(f"Can't connect to the GPS on {device}") from e
        logger.info("Opened %s at %d baud", device, baudrate)

    def read_byte(self) -> int | None:
        """Read one byte, returning None when the read timed out.

        Raises:
            TransportError: If the port reports an I/O failure.
        """
        try:
            data: bytes = self._serial.read(1)
        except serial.SerialException as e:
            raise TransportError("Serial read failed") from e
        if not data:
            return None
        return data[0]

    @property
    def exhausted(self) -> bool:
        return False

    def cancel_read(self) -> None:
        """Unblock a pending ``read_byte``, which then returns None."""
        if self._serial.is_open:
            self._serial.cancel_read()

    def close(self) -> None:
        self._serial.close()


class StreamByteSource:
    """Byte source over a binary file object (log replay, tests)."""

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream
        self._exhausted = False

    def read_byte(self) -> int | None:
        data = self._stream.read(1)
        if not data:
            self._exhausted = True
            return None
        return data[0]

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    def close(self) -> None:
        self._stream.close()
