"""Shared utilities used across the ParkPulse marketplace."""

import re


def html_to_plain_text(html: str) -> str:
    """Convert a generated HTML email body to plain text for mailto links.

    Examples:
        >>> html_to_plain_text("<p>Hello</p><p>World</p>")
        'Hello\\n\\nWorld'
        >>> html_to_plain_text("Line one<br/>Line two")
        'Line one\\n\\nLine two'
    """
    text = re.sub(r"<br\s*/?>", "\n\n", html, flags=re.IGNORECASE)
    text = re.sub(r"<p\s*/?>", "\n\n", text, flags=re.IGNORECASE)
    text = re.sub(r"<[^>]*>", "", text)
    text = re.sub(r"(\n\s*){3,}", "\n\n", text)
    return text.strip()


def format_location(address: str, city: str, state: str, zip_code: str) -> str:
    """Join listing address parts the way they are shown to renters.

    Examples:
        >>> format_location("12 Elm St", "Oshawa", "ON", "L1H 1A1")
        '12 Elm St, Oshawa, ON L1H 1A1'
    """
    return f"{address}, {city}, {state} {zip_code}".strip()
