"""Tests for ZDA parsing and date/time composition."""

from datetime import datetime, timezone

import pytest

from serialgps.errors import DateFormatError
from serialgps.nmea import SentenceType, parse_date_time, parse_sentence
from serialgps.nmea.timestamp import compose, expand_year
from serialgps.nmea.zda import compose_date, parse_zda


class TestParseZDA:
    def test_valid_zda(self):
        sentence_type, update = parse_sentence("$GPZDA,201530.00,04,07,2002,00,00*60")
        assert sentence_type is SentenceType.ZDA
        assert update.fields == {
            "time": "201530.00",
            "date": "040702",
            "local_hour_offset": "00",
            "local_minute_offset": "00",
        }

    def test_two_digit_year_kept(self):
        update = parse_zda(["201530", "04", "07", "02"])
        assert update.fields["date"] == "040702"

    def test_missing_date_component_omits_date(self):
        update = parse_zda(["201530", "04", "", "2002"])
        assert "date" not in update.fields
        assert update.fields["time"] == "201530"

    def test_truncated_zda(self):
        assert parse_zda(["201530"]).fields == {"time": "201530"}


class TestComposeDate:
    @pytest.mark.parametrize(
        ("year", "expected"),
        [("2002", "040702"), ("02", "040702"), ("1999", "040799")],
    )
    def test_year_reduced_to_last_two_digits(self, year, expected):
        assert compose_date("04", "07", year) == expected

    def test_absent_component(self):
        assert compose_date("04", "07", None) is None


class TestParseDateTime:
    def test_valid(self):
        assert parse_date_time("123519", "230394") == datetime(
            1994, 3, 23, 12, 35, 19, tzinfo=timezone.utc
        )

    def test_decimal_seconds_stripped(self):
        assert parse_date_time("123519.456", "230324") == datetime(
            2024, 3, 23, 12, 35, 19, tzinfo=timezone.utc
        )

    def test_trailing_dot_stripped(self):
        assert parse_date_time("123519.", "230324") is not None

    def test_result_is_utc(self):
        result = parse_date_time("000000", "010100")
        assert result is not None
        assert result.tzinfo is timezone.utc

    @pytest.mark.parametrize(
        ("time", "date"),
        [(None, "230394"), ("", "230394"), ("123519", None), ("123519", ""), (None, None)],
    )
    def test_absent_when_missing(self, time, date):
        assert parse_date_time(time, date) is None

    @pytest.mark.parametrize(
        ("time", "date"),
        [
            ("1235", "230394"),
            ("123519", "2303"),
            ("12:35:19", "230394"),
            ("123519", "23031994"),
            ("abcdef", "230394"),
        ],
    )
    def test_layout_mismatch_raises(self, time, date):
        with pytest.raises(DateFormatError):
            parse_date_time(time, date)

    @pytest.mark.parametrize(
        ("time", "date"),
        [("123519", "320394"), ("123519", "231394"), ("253519", "230394")],
    )
    def test_impossible_values_raise(self, time, date):
        with pytest.raises(DateFormatError):
            parse_date_time(time, date)

    def test_date_format_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse_date_time("1235", "230394")


class TestCenturyPolicy:
    @pytest.mark.parametrize(
        ("two_digit", "expected"),
        [(0, 2000), (24, 2024), (79, 2079), (80, 1980), (99, 1999)],
    )
    def test_expand_year(self, two_digit, expected):
        assert expand_year(two_digit) == expected

    def test_compose(self):
        assert compose("123519.00", "230394") == "230394 123519 UTC"
