"""Domain layer exports."""

from condensify.domain.bullets import (
    format_as_bullets,
    join_partials,
    reassemble,
    split_sentences,
)
from condensify.domain.chunker import iter_chunks, split_text, validate_window
from condensify.domain.models import Chunk, SummaryResult
from condensify.domain.summary_pipeline import SummaryPipeline

__all__ = [
    "Chunk",
    "SummaryResult",
    "SummaryPipeline",
    "format_as_bullets",
    "iter_chunks",
    "join_partials",
    "reassemble",
    "split_sentences",
    "split_text",
    "validate_window",
]
