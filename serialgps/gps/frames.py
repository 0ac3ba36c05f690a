"""Frame reader: splits a byte stream into candidate NMEA lines.

Reading strategy:
    Bytes are accumulated one at a time until a line feed (byte 10). The
    buffer is then left-stripped; if it starts with ``$`` it is a candidate
    sentence, otherwise it was a partial or garbled line (typically the tail
    of a sentence already in flight when the port was opened) and is
    discarded. Carriage returns stay in the returned line; the classifier
    strips them.
"""

import logging
import threading

from serialgps.errors import AcquisitionCancelled, FrameError, TransportError
from serialgps.gps.source import ByteSource

__all__ = ["next_sentence"]

logger = logging.getLogger(__name__)

_LINE_FEED = 10
_START_MARKER = "$"
# NMEA caps sentences at 82 characters; anything far longer is line noise
_MAX_FRAME_LENGTH = 1024


def _candidate(buffer: bytearray) -> str:
    """Decode a completed line and check its start marker.

    Raises:
        FrameError: If the line does not start with ``$``.
    """
    line = buffer.decode("ascii", errors="replace").lstrip()
    if not line.startswith(_START_MARKER):
        raise FrameError(f"Discarded fragment without start marker: {line!r}")
    return line


def _check_cancelled(cancel: threading.Event | None) -> None:
    if cancel is not None and cancel.is_set():
        raise AcquisitionCancelled("GPS read cancelled.")


def next_sentence(source: ByteSource, cancel: threading.Event | None = None) -> str:
    """Block until the next candidate sentence arrives.

    Args:
        source: Byte source to consume from
        cancel: Optional cancellation token, checked whenever a fragment is
            discarded

    Returns:
        The line starting at ``$``, without its line feed

    Raises:
        TransportError: If the source yields no byte (timeout, end of stream).
        AcquisitionCancelled: If *cancel* is set while discarding noise.
    """
    buffer = bytearray()
    while True:
        byte = source.read_byte()
        if byte is None:
            raise TransportError("Can't read from the GPS: no data received.")

        if byte != _LINE_FEED:
            buffer.append(byte)
            if len(buffer) > _MAX_FRAME_LENGTH:
                logger.debug("Discarded %d bytes without a line feed", len(buffer))
                buffer.clear()
                _check_cancelled(cancel)
            continue

        try:
            return _candidate(buffer)
        except FrameError as e:
            logger.debug("%s", e)
            buffer.clear()
            _check_cancelled(cancel)
