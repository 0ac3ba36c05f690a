"""GPS readers: decode a byte stream into an accumulated fix.

Reading strategy:
    One read attempt pulls candidate lines from the byte source until a
    sentence of a supported type arrives, then merges its fields into the
    session's ``FixRecord``. Garbled lines and unknown sentence types are
    skipped inside the attempt. A byte source that yields nothing raises
    ``TransportError`` and aborts the attempt.

    ``get_data`` repeats read attempts under the acquisition policy until
    GGA and RMC have both been seen over enough reads. Iterating a reader
    yields a ``FixFrame`` per read attempt, turning transport failures into
    error frames so a live display never crashes. Iteration ends on
    ``cancel`` or when a replayed stream is exhausted.

    The cancellation token is checked on every skipped line, not only
    between read attempts, so a receiver that only sends unsupported
    sentences or noise cannot hold a cancelled reader.
"""

import logging
import threading
from collections.abc import Iterator
from datetime import datetime
from types import TracebackType

from serialgps.errors import AcquisitionCancelled, TransportError
from serialgps.gps.accumulator import FixRecord
from serialgps.gps.acquisition import AcquisitionPolicy, AcquisitionResult, Failed
from serialgps.gps.frames import next_sentence
from serialgps.gps.source import (
    DEFAULT_BAUDRATE,
    DEFAULT_TIMEOUT,
    ByteSource,
    SerialByteSource,
)
from serialgps.gps.types import FixFrame, FixSnapshot
from serialgps.nmea.parsers import parse_sentence
from serialgps.nmea.types import SentenceType

__all__ = ["GPSDecoder", "SerialGPS"]

logger = logging.getLogger(__name__)


class GPSDecoder:
    """Decoder session over an open byte source.

    Owns the session's ``FixRecord``; the record lives as long as the
    decoder and is never cleared.

    Single read::

        decoder = GPSDecoder(StreamByteSource(open("drive.nmea", "rb")))
        snapshot = decoder.read()

    Wait for a usable fix::

        snapshot = decoder.get_data()

    Live frames (each is a snapshot or a recoverable error)::

        for frame in decoder:
            render(frame)

    Args:
        source: Byte source to decode from.
        policy: Acquisition policy for ``get_data`` (default thresholds if
            omitted).
    """

    def __init__(
        self,
        source: ByteSource,
        policy: AcquisitionPolicy | None = None,
    ) -> None:
        self._source = source
        self._policy = policy or AcquisitionPolicy()
        self._record = FixRecord()
        self._cancel = threading.Event()

    @property
    def record(self) -> FixRecord:
        return self._record

    def cancel(self) -> None:
        """Stop ``get_data`` and frame iteration at the next read boundary."""
        self._cancel.set()

    @property
    def cancelled(self) -> bool:
        return self._cancel.is_set()

    def next_sentence(self) -> str:
        """Return the next raw candidate sentence.

        Raises:
            TransportError: If the byte source yields no byte.
            AcquisitionCancelled: If ``cancel`` was called.
        """
        return next_sentence(self._source, self._cancel)

    def _check_cancelled(self) -> None:
        if self._cancel.is_set():
            raise AcquisitionCancelled("GPS read cancelled.")

    def _read_once(self) -> SentenceType:
        """Merge the next supported sentence, returning its type."""
        while True:
            self._check_cancelled()
            line = self.next_sentence()
            parsed = parse_sentence(line)
            if parsed is None:
                continue
            sentence_type, update = parsed
            if sentence_type is SentenceType.UNKNOWN:
                logger.debug("Skipped unsupported sentence: %s", line.rstrip())
                continue
            self._record.merge(update, sentence_type)
            return sentence_type

    def read(self) -> FixSnapshot:
        """Merge the next supported sentence and return the current fix.

        Raises:
            TransportError: If the byte source yields no byte.
            AcquisitionCancelled: If ``cancel`` was called.
        """
        self._read_once()
        return self._record.snapshot()

    def acquire(self) -> AcquisitionResult:
        """Run the acquisition policy and return its typed result."""
        return self._policy.run(self._read_once, self._record, self._cancel)

    def get_data(self) -> FixSnapshot:
        """Read until GGA and RMC data have been gathered.

        Returns:
            Snapshot of the accumulated fix.

        Raises:
            DataTimeoutError: If the read budget ran out first.
            TransportError: If too many consecutive reads failed.
            AcquisitionCancelled: If ``cancel`` was called.
        """
        result = self.acquire()
        if isinstance(result, Failed):
            raise result.error
        return result.snapshot

    def date_time(self) -> datetime | None:
        """UTC timestamp of the current fix, None until time and date arrive.

        Raises:
            DateFormatError: If the fields do not compose to a valid timestamp.
        """
        return self._record.date_time()

    def frames(self) -> Iterator[FixFrame]:
        """Yield one frame per read attempt until cancelled.

        Transport failures are yielded as error frames and do not end the
        iteration, except the one reporting that the byte source is
        exhausted, which is the last frame. ``cancel`` ends the iteration at
        the next skipped line or read attempt.
        """
        while not self._cancel.is_set():
            try:
                snapshot = self.read()
            except AcquisitionCancelled:
                return
            except TransportError as e:
                yield FixFrame(error=e)
                if self._source.exhausted:
                    return
            else:
                yield FixFrame(snapshot=snapshot)

    def __iter__(self) -> Iterator[FixFrame]:
        return self.frames()

    def close(self) -> None:
        self._source.close()


class SerialGPS(GPSDecoder):
    """Context manager decoding NMEA from a serial GPS unit.

    The port is opened in ``__enter__`` and closed in ``__exit__``::

        with SerialGPS("/dev/ttyUSB0") as gps:
            data = gps.get_data()
            print(data["latitude"], data["lat_ref"])

    Args:
        device: Serial device path.
        baudrate: Line speed (default: 4800).
        timeout: Per-byte read timeout in seconds (default: 30.0).
        policy: Acquisition policy for ``get_data``.
    """

    def __init__(
        self,
        device: str,
        baudrate: int = DEFAULT_BAUDRATE,
        timeout: float = DEFAULT_TIMEOUT,
        policy: AcquisitionPolicy | None = None,
    ) -> None:
        self._device = device
        self._baudrate = baudrate
        self._timeout = timeout
        self._serial_source: SerialByteSource | None = None
        self._port_lock = threading.Lock()
        super().__init__(_UnopenedSource(), policy)

    @property
    def device(self) -> str:
        return self._device

    def __enter__(self) -> "SerialGPS":
        """Open the serial port."""
        serial_source = SerialByteSource(
            self._device,
            baudrate=self._baudrate,
            timeout=self._timeout,
        )
        with self._port_lock:
            self._serial_source = serial_source
            self._source = serial_source
        logger.info("Connected to GPS on %s", self._device)
        return self

    def cancel(self) -> None:
        """Stop at the next read boundary and unblock a pending serial read."""
        super().cancel()
        # __exit__ may be closing the port on the reading thread
        with self._port_lock:
            if self._serial_source is not None:
                self._serial_source.cancel_read()

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Close the serial port."""
        with self._port_lock:
            if self._serial_source is not None:
                self._serial_source.close()
                self._serial_source = None
                logger.info("Closed GPS on %s", self._device)
            self._source = _UnopenedSource()


class _UnopenedSource:
    """Placeholder source for a ``SerialGPS`` used outside ``with``."""

    def read_byte(self) -> int | None:
        raise RuntimeError("SerialGPS must be used as a context manager.")

    @property
    def exhausted(self) -> bool:
        return False

    def close(self) -> None:
        pass
