"""Acquisition policy: decides when the fix record is usable.

A single pass over the talker cycle may deliver GGA without a fresh RMC or
the other way round, so the policy waits for both types AND a minimum number
of completed reads. That biases toward a fresher combined fix rather than
the first sighting of each type.

State machine:
    READING --read ok, GGA+RMC seen, reads >= 6--> SATISFIED
    READING --read ok, reads >= 25--------------> FAILED (DataTimeoutError)
    READING --TransportError, errors > 5--------> FAILED (TransportError)
    READING --cancellation token set------------> FAILED (AcquisitionCancelled)
    READING --read raised AcquisitionCancelled--> FAILED (AcquisitionCancelled)

``errors`` counts consecutive transport failures and resets on every
successful read.
"""

import enum
import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass

from serialgps.errors import (
    AcquisitionCancelled,
    DataTimeoutError,
    GPSError,
    TransportError,
)
from serialgps.gps.accumulator import FixRecord
from serialgps.gps.types import FixSnapshot
from serialgps.nmea.types import SentenceType

__all__ = [
    "AcquisitionPolicy",
    "AcquisitionResult",
    "AcquisitionState",
    "Failed",
    "Satisfied",
    "State",
]

logger = logging.getLogger(__name__)

_REQUIRED_TYPES = (SentenceType.GGA, SentenceType.RMC)
_MIN_READS = 6
_MAX_READS = 25
_MAX_CONSECUTIVE_ERRORS = 5

_TIMEOUT_MESSAGE = (
    "Could not gather enough data from the GPS. Perhaps the NMEA data is "
    "corrupt. Did you specify the correct serial device?"
)


class State(enum.Enum):
    READING = "reading"
    SATISFIED = "satisfied"
    FAILED = "failed"


@dataclass(frozen=True)
class Satisfied:
    """Terminal result: the record holds a usable fix."""

    snapshot: FixSnapshot


@dataclass(frozen=True)
class Failed:
    """Terminal result: the read budget or error budget ran out."""

    error: GPSError


AcquisitionResult = Satisfied | Failed


@dataclass
class AcquisitionState:
    """Counters for one acquisition; created fresh per ``run`` call."""

    reads: int = 0
    errors: int = 0
    state: State = State.READING


class AcquisitionPolicy:
    """Bounded read loop that waits for a usable GGA + RMC fix.

    Args:
        min_reads: Completed reads required before the fix counts as usable
            (default: 6).
        max_reads: Completed reads after which acquisition gives up
            (default: 25).
        max_consecutive_errors: Consecutive transport failures tolerated;
            one more is fatal (default: 5).
    """

    def __init__(
        self,
        min_reads: int = _MIN_READS,
        max_reads: int = _MAX_READS,
        max_consecutive_errors: int = _MAX_CONSECUTIVE_ERRORS,
    ) -> None:
        self.min_reads = min_reads
        self.max_reads = max_reads
        self.max_consecutive_errors = max_consecutive_errors

    def on_read(self, state: AcquisitionState, record: FixRecord) -> Failed | None:
        """Advance after a successful read attempt.

        Returns:
            ``Failed`` if the read budget is exhausted, otherwise None. The
            state is moved to SATISFIED when the fix is usable.
        """
        state.reads += 1
        state.errors = 0
        if record.has_seen(*_REQUIRED_TYPES) and state.reads >= self.min_reads:
            state.state = State.SATISFIED
            return None
        if state.reads >= self.max_reads:
            state.state = State.FAILED
            return Failed(DataTimeoutError(_TIMEOUT_MESSAGE))
        return None

    def on_error(self, state: AcquisitionState, error: TransportError) -> Failed | None:
        """Count a recoverable transport failure.

        Returns:
            ``Failed`` carrying *error* once the budget is exceeded, else None.
        """
        state.errors += 1
        logger.warning(
            "GPS read failed (%d/%d): %s",
            state.errors,
            self.max_consecutive_errors,
            error,
        )
        if state.errors > self.max_consecutive_errors:
            state.state = State.FAILED
            return Failed(error)
        return None

    def run(
        self,
        read: Callable[[], object],
        record: FixRecord,
        cancel: threading.Event | None = None,
    ) -> AcquisitionResult:
        """Drive *read* until the fix is usable or a budget runs out.

        Args:
            read: One read attempt: consume frames until one sentence has
                been merged into *record*. Raises ``TransportError`` on a
                recoverable transport failure, and
                ``AcquisitionCancelled`` if it was interrupted by *cancel*.
            record: The accumulator *read* merges into.
            cancel: Optional cancellation token, checked before every read
                attempt. *read* may also honour it mid-attempt.

        Returns:
            ``Satisfied`` with a snapshot of *record*, or ``Failed``.
        """
        state = AcquisitionState()
        while state.state is State.READING:
            if cancel is not None and cancel.is_set():
                state.state = State.FAILED
                return Failed(AcquisitionCancelled("GPS acquisition cancelled."))
            try:
                read()
            except AcquisitionCancelled as e:
                state.state = State.FAILED
                return Failed(e)
            except TransportError as e:
                failed = self.on_error(state, e)
            else:
                failed = self.on_read(state, record)
            if failed is not None:
                return failed

        logger.debug("Acquired fix after %d reads", state.reads)
        return Satisfied(record.snapshot())
