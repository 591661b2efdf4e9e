"""Domain models for transcript summarization."""

from pydantic import BaseModel, Field


class Chunk(BaseModel, frozen=True):
    """A window of the transcript submitted to the summarizer on its own."""

    index: int = Field(ge=0)
    start: int = Field(ge=0)
    text: str

    @property
    def end(self) -> int:
        """Offset one past the last character of the chunk."""
        return self.start + len(self.text)


class SummaryResult(BaseModel):
    """Outcome of one chunk-summarize-reassemble run."""

    chunk_count: int
    partial_summaries: list[str]
    bullet_summary: str
