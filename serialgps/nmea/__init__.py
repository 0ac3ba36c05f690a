"""NMEA 0183 sentence classification and per-type field parsing."""

from serialgps.nmea.classifier import classify
from serialgps.nmea.parsers import PARSERS, parse_fields, parse_sentence
from serialgps.nmea.timestamp import parse_date_time
from serialgps.nmea.types import FieldUpdate, SatelliteSlot, SentenceType

__all__ = [
    "PARSERS",
    "FieldUpdate",
    "SatelliteSlot",
    "SentenceType",
    "classify",
    "parse_date_time",
    "parse_fields",
    "parse_sentence",
]
