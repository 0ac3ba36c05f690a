"""Tests for the acquisition policy state machine."""

import threading
from collections.abc import Callable, Iterable

import pytest

from serialgps.errors import (
    AcquisitionCancelled,
    DataTimeoutError,
    TransportError,
)
from serialgps.gps import AcquisitionPolicy, Failed, FixRecord, Satisfied
from serialgps.gps.acquisition import AcquisitionState, State
from serialgps.nmea import FieldUpdate, SentenceType

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _scripted_reads(
    record: FixRecord,
    script: Iterable[SentenceType | TransportError],
) -> tuple[Callable[[], None], list[int]]:
    """Build a read function that merges or raises per *script* entry.

    Returns the function and a one-element list counting calls.
    """
    steps = iter(script)
    calls = [0]

    def read() -> None:
        calls[0] += 1
        step = next(steps)
        if isinstance(step, TransportError):
            raise step
        record.merge(FieldUpdate(fields={"time": str(calls[0])}), step)

    return read, calls


_GGA = SentenceType.GGA
_RMC = SentenceType.RMC
_GSV = SentenceType.GSV


# ---------------------------------------------------------------------------
# Satisfied
# ---------------------------------------------------------------------------


class TestSatisfied:
    def test_requires_six_reads_even_when_both_types_seen_early(self):
        record = FixRecord()
        read, calls = _scripted_reads(record, [_GGA, _RMC] + [_GSV] * 20)
        result = AcquisitionPolicy().run(read, record)
        assert isinstance(result, Satisfied)
        assert calls[0] == 6

    def test_waits_for_rmc(self):
        record = FixRecord()
        read, calls = _scripted_reads(record, [_GGA] * 9 + [_RMC] + [_GSV] * 20)
        result = AcquisitionPolicy().run(read, record)
        assert isinstance(result, Satisfied)
        assert calls[0] == 10

    def test_snapshot_reflects_record(self):
        record = FixRecord()
        read, _ = _scripted_reads(record, [_GGA, _RMC] * 3)
        result = AcquisitionPolicy().run(read, record)
        assert isinstance(result, Satisfied)
        assert result.snapshot["time"] == "6"
        assert result.snapshot.seen_types == {_GGA, _RMC}

    def test_satisfied_on_last_allowed_read(self):
        record = FixRecord()
        read, calls = _scripted_reads(record, [_GGA] * 24 + [_RMC])
        result = AcquisitionPolicy().run(read, record)
        assert isinstance(result, Satisfied)
        assert calls[0] == 25

    def test_types_seen_before_acquisition_count(self):
        record = FixRecord()
        record.merge(FieldUpdate(), _GGA)
        record.merge(FieldUpdate(), _RMC)
        read, calls = _scripted_reads(record, [_GSV] * 10)
        assert isinstance(AcquisitionPolicy().run(read, record), Satisfied)
        assert calls[0] == 6


# ---------------------------------------------------------------------------
# Failed
# ---------------------------------------------------------------------------


class TestFailed:
    def test_data_timeout_after_twenty_five_reads(self):
        record = FixRecord()
        read, calls = _scripted_reads(record, [_GGA] * 30)
        result = AcquisitionPolicy().run(read, record)
        assert isinstance(result, Failed)
        assert isinstance(result.error, DataTimeoutError)
        assert calls[0] == 25

    def test_six_consecutive_transport_errors_are_fatal(self):
        record = FixRecord()
        errors = [TransportError(f"timeout {i}") for i in range(6)]
        read, calls = _scripted_reads(record, errors)
        result = AcquisitionPolicy().run(read, record)
        assert isinstance(result, Failed)
        assert result.error is errors[-1]
        assert calls[0] == 6

    def test_five_consecutive_errors_are_tolerated(self):
        record = FixRecord()
        script = [TransportError("t")] * 5 + [_GGA, _RMC] * 3
        read, calls = _scripted_reads(record, script)
        result = AcquisitionPolicy().run(read, record)
        assert isinstance(result, Satisfied)
        assert calls[0] == 11

    def test_error_count_resets_after_successful_read(self):
        record = FixRecord()
        burst = [TransportError("t")] * 5
        script = burst + [_GGA] + burst + [_RMC] + burst + [_GGA] * 4
        read, _ = _scripted_reads(record, script)
        assert isinstance(AcquisitionPolicy().run(read, record), Satisfied)

    def test_errors_do_not_count_as_reads(self):
        record = FixRecord()
        script = ([TransportError("t")] * 5 + [_GGA]) * 24 + [_GGA]
        read, calls = _scripted_reads(record, script)
        result = AcquisitionPolicy().run(read, record)
        assert isinstance(result, Failed)
        assert isinstance(result.error, DataTimeoutError)
        assert calls[0] == 24 * 6 + 1

    def test_other_exceptions_propagate(self):
        def read() -> None:
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError, match="boom"):
            AcquisitionPolicy().run(read, FixRecord())


# ---------------------------------------------------------------------------
# Cancellation
# ---------------------------------------------------------------------------


class TestCancellation:
    def test_cancelled_before_first_read(self):
        record = FixRecord()
        read, calls = _scripted_reads(record, [_GGA] * 10)
        cancel = threading.Event()
        cancel.set()
        result = AcquisitionPolicy().run(read, record, cancel)
        assert isinstance(result, Failed)
        assert isinstance(result.error, AcquisitionCancelled)
        assert calls[0] == 0

    def test_cancel_honoured_at_next_read_boundary(self):
        record = FixRecord()
        cancel = threading.Event()
        calls = [0]

        def read() -> None:
            calls[0] += 1
            record.merge(FieldUpdate(), _GGA)
            if calls[0] == 3:
                cancel.set()

        result = AcquisitionPolicy().run(read, record, cancel)
        assert isinstance(result, Failed)
        assert isinstance(result.error, AcquisitionCancelled)
        assert calls[0] == 3

    def test_cancelled_mid_read(self):
        error = AcquisitionCancelled("GPS read cancelled.")

        def read() -> None:
            raise error

        result = AcquisitionPolicy().run(read, FixRecord())
        assert result == Failed(error)


# ---------------------------------------------------------------------------
# Custom thresholds and state transitions
# ---------------------------------------------------------------------------


class TestPolicyConfiguration:
    def test_custom_thresholds(self):
        record = FixRecord()
        read, calls = _scripted_reads(record, [_GGA, _RMC] + [_GSV] * 5)
        policy = AcquisitionPolicy(min_reads=2, max_reads=3)
        assert isinstance(policy.run(read, record), Satisfied)
        assert calls[0] == 2

    def test_on_read_transitions(self):
        record = FixRecord()
        record.merge(FieldUpdate(), _GGA)
        record.merge(FieldUpdate(), _RMC)
        state = AcquisitionState(reads=4, errors=3)
        policy = AcquisitionPolicy()
        assert policy.on_read(state, record) is None
        assert state.state is State.READING
        assert state.errors == 0
        assert policy.on_read(state, record) is None
        assert state.state is State.SATISFIED

    def test_on_error_transitions(self):
        state = AcquisitionState(errors=5)
        error = TransportError("t")
        failed = AcquisitionPolicy().on_error(state, error)
        assert failed == Failed(error)
        assert state.state is State.FAILED
