"""Dispatch from sentence type to field parser."""

from collections.abc import Callable

from serialgps.nmea.classifier import classify
from serialgps.nmea.gga import parse_gga
from serialgps.nmea.gll import parse_gll
from serialgps.nmea.gsa import parse_gsa
from serialgps.nmea.gsv import parse_gsv
from serialgps.nmea.hdt import parse_hdt
from serialgps.nmea.rma import parse_rma
from serialgps.nmea.rmc import parse_rmc
from serialgps.nmea.types import FieldUpdate, SentenceType
from serialgps.nmea.zda import parse_zda

__all__ = ["PARSERS", "parse_fields", "parse_sentence"]

FieldParser = Callable[[list[str]], FieldUpdate]

PARSERS: dict[SentenceType, FieldParser] = {
    SentenceType.GGA: parse_gga,
    SentenceType.RMC: parse_rmc,
    SentenceType.GLL: parse_gll,
    SentenceType.RMA: parse_rma,
    SentenceType.GSA: parse_gsa,
    SentenceType.GSV: parse_gsv,
    SentenceType.HDT: parse_hdt,
    SentenceType.ZDA: parse_zda,
}


def parse_fields(sentence_type: SentenceType, fields: list[str]) -> FieldUpdate:
    """Run the parser registered for *sentence_type*.

    ``UNKNOWN`` and any unregistered type produce an empty update.
    """
    parser = PARSERS.get(sentence_type)
    if parser is None:
        return FieldUpdate()
    return parser(fields)


def parse_sentence(line: str) -> tuple[SentenceType, FieldUpdate] | None:
    """Classify and parse one raw line.

    Args:
        line: Raw NMEA sentence, e.g. "$GPHDT,274.07,T*03"

    Returns:
        ``(sentence_type, update)``, or None if the line is not a sentence

    Example:
        >>> sentence_type, update = parse_sentence("$GPHDT,274.07,T*03")
        >>> sentence_type, update.fields
        (<SentenceType.HDT: 'HDT'>, {'heading': '274.07'})
    """
    classified = classify(line)
    if classified is None:
        return None
    sentence_type, fields = classified
    return sentence_type, parse_fields(sentence_type, fields)
