"""Tests for header date/time normalisation."""

from __future__ import annotations

from datetime import date, datetime, time

from abagen.formatting.dates import format_date, format_time, normalise_header_moment

NOW = datetime(2024, 3, 9, 14, 30)


def clock():
    return NOW


def test_format_date_and_time():
    assert format_date(date(2007, 6, 18)) == "180607"
    assert format_date(date(2000, 1, 2)) == "020100"
    assert format_time(datetime(2014, 7, 5, 0, 8)) == "0008"
    assert format_time(time(23, 59)) == "2359"


class TestNormaliseHeaderMoment:
    def test_defaults_to_clock_date_and_blank_time(self):
        assert normalise_header_moment(None, None, clock) == ("090324", "")
        assert normalise_header_moment(None, "", clock) == ("090324", "")

    def test_explicit_date_leaves_time_blank(self):
        assert normalise_header_moment(date(2007, 6, 18), None, clock) == ("180607", "")

    def test_datetime_time_drives_both_fields(self):
        moment = datetime(2014, 7, 5, 0, 8)
        assert normalise_header_moment(None, moment, clock) == ("050714", "0008")

    def test_time_of_day_with_clock_date(self):
        assert normalise_header_moment(None, time(9, 5), clock) == ("090324", "0905")

    def test_preformatted_strings_pass_through(self):
        assert normalise_header_moment("311299", "2359", clock) == ("311299", "2359")

    def test_clock_not_consulted_when_date_given(self):
        def failing_clock():
            raise AssertionError("clock should not be called")

        assert normalise_header_moment("010101", None, failing_clock) == ("010101", "")
