"""Response models for the summary backend API."""

from pydantic import BaseModel


class SummaryResponse(BaseModel):
    """Outcome of a summarization request."""

    success: bool
    summary: str | None = None
    error: str | None = None


class EmailResponse(BaseModel):
    """Outcome of an email request."""

    success: bool
    error: str | None = None
