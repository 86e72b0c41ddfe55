"""Tests for shared utility functions."""

from parkpulse.utils import format_location, html_to_plain_text


class TestHtmlToPlainText:
    def test_paragraphs_become_blank_lines(self):
        assert html_to_plain_text("<p>Hello</p><p>World</p>") == "Hello\n\nWorld"

    def test_line_breaks(self):
        assert html_to_plain_text("One<br>Two<BR/>Three") == "One\n\nTwo\n\nThree"

    def test_tags_stripped(self):
        assert html_to_plain_text('<strong>Booked</strong> <a href="x">here</a>') == "Booked here"

    def test_collapses_extra_newlines(self):
        assert html_to_plain_text("A<br><br><br>B") == "A\n\nB"

    def test_trims(self):
        assert html_to_plain_text("  <p>Hi</p>  ") == "Hi"


class TestFormatLocation:
    def test_joins_parts(self):
        assert format_location("12 Elm St", "Oshawa", "ON", "L1H 1A1") == "12 Elm St, Oshawa, ON L1H 1A1"
