"""Generated notification email payloads."""

from pydantic import BaseModel, Field


class SingleEmail(BaseModel):
    """One email to one recipient."""
    subject: str = Field(description="The subject line for the email.")
    body: str = Field(description="The full, friendly, and helpful HTML email body.")


class BookerOwnerEmails(BaseModel):
    """A pair of emails sent for the same event to both booker and owner."""
    booker_subject: str = Field(description="Subject line for the booker's email.")
    booker_email_content: str = Field(description="Email body for the person who booked the spot.")
    owner_subject: str = Field(description="Subject line for the driveway owner's email.")
    owner_email_content: str = Field(description="Email body for the driveway owner.")
