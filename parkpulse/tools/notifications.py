"""
Mock email dispatch via mailto links.

The web client hands a ``mailto:`` link to the user's mail program. Here the
link is built the same way and kept in an in-memory outbox, so flows and
tests can inspect what would have been sent. Booking state never depends on
whether dispatch succeeds.
"""

import logging
from typing import TypedDict
from urllib.parse import quote

from parkpulse.utils import html_to_plain_text

logger = logging.getLogger(__name__)


class SentEmail(TypedDict):
    """An email handed off for delivery."""

    to: str
    subject: str
    body: str
    mailto: str


_outbox: list[SentEmail] = []


def build_mailto_link(to: str, subject: str, html_body: str) -> str:
    """Build a ``mailto:`` link with a URL-encoded subject and plain-text body."""
    plain_body = html_to_plain_text(html_body)
    return f"mailto:{to}?subject={quote(subject, safe='')}&body={quote(plain_body, safe='')}"


def send_email(to: str, subject: str, html_body: str) -> bool:
    """Dispatch an email. Returns False when a required field is missing."""
    missing = [
        name for name, value in [("to", to), ("subject", subject), ("body", html_body)]
        if not value or not value.strip()
    ]
    if missing:
        logger.error("send_email failed: missing required fields: %s", ", ".join(missing))
        return False

    link = build_mailto_link(to, subject, html_body)
    _outbox.append({
        "to": to,
        "subject": subject,
        "body": html_to_plain_text(html_body),
        "mailto": link,
    })
    logger.info("Email dispatched to %s: %s", to, subject)
    return True


def get_outbox() -> list[SentEmail]:
    """Return every email dispatched so far, oldest first."""
    return list(_outbox)


def reset() -> None:
    """Clear the outbox. Used by test fixtures for isolation."""
    _outbox.clear()
