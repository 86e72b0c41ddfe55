"""Tests for wall-clock time parsing and same-day spans."""

import pytest

from parkpulse.booking.time_window import (
    TimeSpan,
    format_time_of_day,
    parse_time_of_day,
    parse_time_span,
    spans_overlap,
)


class TestParseTimeOfDay:
    @pytest.mark.parametrize("text,minutes", [
        ("00:00", 0),
        ("09:00", 540),
        ("9:00", 540),
        ("17:30", 1050),
        ("23:59", 1439),
    ])
    def test_valid_times(self, text, minutes):
        assert parse_time_of_day(text) == minutes

    @pytest.mark.parametrize("text", [
        "", "9", "0900", "24:00", "12:60", "9:5", "123:00",
        " 09:00", "09:00 ", "9am", "09:00:00", "-1:00", "ab:cd",
    ])
    def test_invalid_times_return_none(self, text):
        assert parse_time_of_day(text) is None

    @pytest.mark.parametrize("value", [None, 540, 9.0, ["09:00"]])
    def test_non_strings_return_none(self, value):
        assert parse_time_of_day(value) is None

    def test_full_width_digits_rejected(self):
        assert parse_time_of_day("０９:００") is None


class TestFormatTimeOfDay:
    def test_zero_padded(self):
        assert format_time_of_day(540) == "09:00"
        assert format_time_of_day(0) == "00:00"
        assert format_time_of_day(1439) == "23:59"

    @pytest.mark.parametrize("minutes", [-1, 1440])
    def test_out_of_range_raises(self, minutes):
        with pytest.raises(ValueError, match="out of range"):
            format_time_of_day(minutes)

    def test_parse_after_format_is_identity(self):
        for minutes in (0, 61, 720, 1439):
            assert parse_time_of_day(format_time_of_day(minutes)) == minutes

    @pytest.mark.parametrize("text,canonical", [("9:00", "09:00"), ("09:00", "09:00"), ("0:05", "00:05")])
    def test_canonical_form_is_idempotent(self, text, canonical):
        minutes = parse_time_of_day(text)
        assert format_time_of_day(minutes) == canonical
        assert parse_time_of_day(canonical) == minutes
        assert format_time_of_day(parse_time_of_day(canonical)) == canonical


class TestTimeSpan:
    def test_duration(self):
        assert TimeSpan(540, 1020).duration_minutes == 480

    def test_inverted_span_has_zero_duration(self):
        span = TimeSpan(1020, 540)
        assert not span.is_ordered
        assert span.duration_minutes == 0

    def test_contains_is_inclusive_at_edges(self):
        window = TimeSpan(540, 1020)
        assert window.contains(TimeSpan(540, 1020))
        assert window.contains(TimeSpan(600, 660))
        assert not window.contains(TimeSpan(539, 600))
        assert not window.contains(TimeSpan(600, 1021))

    def test_str(self):
        assert str(TimeSpan(540, 1020)) == "09:00 - 17:00"

    def test_parse_span_rejects_either_bad_end(self):
        assert parse_time_span("09:00", "17:00") == TimeSpan(540, 1020)
        assert parse_time_span("09:00", "25:00") is None
        assert parse_time_span("", "17:00") is None


class TestSpansOverlap:
    def test_overlapping(self):
        assert spans_overlap(TimeSpan(600, 720), TimeSpan(660, 780))

    def test_back_to_back_is_not_overlap(self):
        assert not spans_overlap(TimeSpan(600, 720), TimeSpan(720, 780))
        assert not spans_overlap(TimeSpan(720, 780), TimeSpan(600, 720))

    def test_containment_is_overlap(self):
        assert spans_overlap(TimeSpan(540, 1020), TimeSpan(600, 660))

    def test_symmetric(self):
        a, b = TimeSpan(600, 700), TimeSpan(650, 800)
        assert spans_overlap(a, b) == spans_overlap(b, a)
