"""Splits transcripts into overlapping fixed-size windows."""

from collections.abc import Iterator

from condensify.domain.models import Chunk
from condensify.exceptions import InvalidChunkConfigError


def validate_window(max_length: int, overlap: int) -> None:
    """
    Checks that a window size and overlap advance the cursor.

    Raises:
        InvalidChunkConfigError: If max_length is not positive, overlap is
            negative, or overlap is not smaller than max_length.
    """
    if max_length <= 0 or overlap < 0 or overlap >= max_length:
        raise InvalidChunkConfigError(max_length, overlap)


def iter_chunks(text: str, max_length: int, overlap: int) -> Iterator[Chunk]:
    """
    Yields overlapping windows of ``text`` in order.

    Each window starts ``max_length - overlap`` characters after the previous
    one, so consecutive windows share exactly ``overlap`` characters. The last
    window is whatever remains up to the end of the text and is not padded.
    A text that fits in one window yields exactly one chunk.

    Args:
        text: The transcript to split.
        max_length: Maximum number of characters per chunk.
        overlap: Number of characters repeated between consecutive chunks.

    Raises:
        InvalidChunkConfigError: If the window would not make progress.
    """
    validate_window(max_length, overlap)

    step = max_length - overlap
    text_length = len(text)
    start = 0
    index = 0
    while start < text_length:
        end = min(start + max_length, text_length)
        yield Chunk(index=index, start=start, text=text[start:end])
        if end == text_length:
            break
        start += step
        index += 1


def split_text(text: str, max_length: int = 1000, overlap: int = 100) -> list[str]:
    """Returns the chunk texts of ``text`` in transcript order."""
    return [chunk.text for chunk in iter_chunks(text, max_length, overlap)]
