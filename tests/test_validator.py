"""Tests for the shared booking window validator."""

import pytest

from parkpulse.booking.time_window import TimeSpan
from parkpulse.booking.validator import (
    END_NOT_AFTER_START_MESSAGE,
    MALFORMED_TIME_MESSAGE,
    RejectionReason,
    validate_booking_window,
)

WINDOW = ("09:00", "17:00")


class TestAccepted:
    def test_exact_window_is_accepted(self):
        result = validate_booking_window("09:00", "17:00", WINDOW)
        assert result.accepted
        assert result.span == TimeSpan(540, 1020)
        assert result.reason is None

    def test_inner_span_is_accepted(self):
        result = validate_booking_window("10:15", "11:45", WINDOW)
        assert result.accepted
        assert result.message == "Requested 10:15 - 11:45."

    def test_single_digit_hour_accepted(self):
        assert validate_booking_window("9:30", "10:00", WINDOW).accepted

    def test_window_as_timespan(self):
        assert validate_booking_window("10:00", "11:00", TimeSpan(540, 1020)).accepted


class TestRejected:
    @pytest.mark.parametrize("start,end", [
        ("", "17:00"), ("09:00", ""), ("9", "10:00"), ("09:00", "24:00"),
        ("12:60", "13:00"), ("9:5", "10:00"), ("9am", "5pm"),
    ])
    def test_malformed_times(self, start, end):
        result = validate_booking_window(start, end, WINDOW)
        assert not result.accepted
        assert result.reason == RejectionReason.MALFORMED_TIME
        assert result.message == MALFORMED_TIME_MESSAGE
        assert result.span is None

    @pytest.mark.parametrize("start,end", [("12:00", "11:00"), ("12:00", "12:00")])
    def test_end_not_after_start(self, start, end):
        result = validate_booking_window(start, end, WINDOW)
        assert result.reason == RejectionReason.END_NOT_AFTER_START
        assert result.message == END_NOT_AFTER_START_MESSAGE

    def test_overnight_span_is_rejected_not_wrapped(self):
        result = validate_booking_window("22:00", "02:00", ("00:00", "23:59"))
        assert result.reason == RejectionReason.END_NOT_AFTER_START

    @pytest.mark.parametrize("start,end", [
        ("08:59", "10:00"), ("16:00", "17:01"), ("08:00", "18:00"), ("18:00", "19:00"),
    ])
    def test_outside_window(self, start, end):
        result = validate_booking_window(start, end, WINDOW)
        assert result.reason == RejectionReason.OUTSIDE_LISTING_WINDOW
        assert "09:00 - 17:00" in result.message

    def test_malformed_listing_window(self):
        result = validate_booking_window("10:00", "11:00", ("9am", "17:00"))
        assert result.reason == RejectionReason.MALFORMED_TIME

    def test_inverted_listing_window(self):
        result = validate_booking_window("10:00", "11:00", ("17:00", "09:00"))
        assert result.reason == RejectionReason.MALFORMED_TIME


class TestCheckOrder:
    def test_malformed_reported_before_ordering(self):
        result = validate_booking_window("25:00", "01:00", WINDOW)
        assert result.reason == RejectionReason.MALFORMED_TIME

    def test_ordering_reported_before_window(self):
        result = validate_booking_window("20:00", "19:00", WINDOW)
        assert result.reason == RejectionReason.END_NOT_AFTER_START

    def test_request_ordering_reported_before_bad_listing_window(self):
        result = validate_booking_window("12:00", "11:00", ("bad", "17:00"))
        assert result.reason == RejectionReason.END_NOT_AFTER_START


class TestDeterminism:
    def test_same_input_same_answer(self):
        first = validate_booking_window("10:00", "18:00", WINDOW)
        second = validate_booking_window("10:00", "18:00", WINDOW)
        assert first == second

    def test_accepted_span_lies_within_window(self):
        for start, end in [("09:00", "09:01"), ("16:59", "17:00"), ("12:00", "13:30")]:
            result = validate_booking_window(start, end, WINDOW)
            assert result.accepted
            assert TimeSpan(540, 1020).contains(result.span)
            assert result.span.start < result.span.end
