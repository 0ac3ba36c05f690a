"""JSON formatting of GPS frames for WebSocket transmission."""

import json

from serialgps.errors import DateFormatError
from serialgps.gps import FixFrame, FixSnapshot

__all__ = ["format_error_message", "format_fix_message", "format_frame_message"]


def _iso_time(snapshot: FixSnapshot) -> str | None:
    try:
        timestamp = snapshot.date_time()
    except DateFormatError:
        return None
    return timestamp.isoformat() if timestamp is not None else None


def format_fix_message(snapshot: FixSnapshot) -> str:
    """Serialize a fix snapshot; ``fix`` holds every field observed so far."""
    return json.dumps({
        "type": "fix",
        "utc": _iso_time(snapshot),
        "seen_types": sorted(t.value for t in snapshot.seen_types),
        "fix": snapshot.to_dict(),
    })


def format_error_message(error: Exception) -> str:
    """Serialize a recoverable read error."""
    return json.dumps({
        "type": "error",
        "error": type(error).__name__,
        "message": str(error),
    })


def format_frame_message(frame: FixFrame) -> str:
    if frame.snapshot is not None:
        return format_fix_message(frame.snapshot)
    assert frame.error is not None
    return format_error_message(frame.error)
