"""Request models for the summary backend API."""

from pydantic import BaseModel


class SummaryRequest(BaseModel):
    """Transcript submitted for summarization."""

    transcript: str | None = None
    # The hosted model takes no instructions; accepted for UI compatibility.
    prompt: str | None = None


class EmailRequest(BaseModel):
    """Summary text to deliver and its recipient."""

    text: str | None = None
    to: str | None = None
