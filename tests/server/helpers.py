"""Helper factories for server tests."""

from types import MappingProxyType

from serialgps.errors import TransportError
from serialgps.gps import FixFrame, FixSnapshot
from serialgps.nmea import SatelliteSlot, SentenceType


def make_snapshot(with_date: bool = True) -> FixSnapshot:
    fields: dict[str, str | int] = {
        "time": "123519",
        "latitude": "4807.038",
        "lat_ref": "N",
        "longitude": "01131.000",
        "long_ref": "E",
        "quality": "1",
        "num_sat": 8,
        "altitude": "545.4",
        "alt_unit": "M",
    }
    if with_date:
        fields["date"] = "230394"
    return FixSnapshot(
        fields=MappingProxyType(fields),
        satellites=(SatelliteSlot(id="04", elevation="40", azimuth="083"),),
        last_sentence_type=SentenceType.RMC,
        seen_types=frozenset({SentenceType.GGA, SentenceType.RMC}),
    )


def make_fix_frame(with_date: bool = True) -> FixFrame:
    return FixFrame(snapshot=make_snapshot(with_date))


def make_error_frame() -> FixFrame:
    return FixFrame(error=TransportError("Can't read from the GPS: no data received."))
