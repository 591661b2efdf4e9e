"""Unit tests for transcript windowing."""

import pytest

from condensify.domain import iter_chunks, split_text
from condensify.exceptions import InvalidChunkConfigError


def _reconstruct(chunks: list[str], overlap: int) -> str:
    if not chunks:
        return ""
    return chunks[0] + "".join(chunk[overlap:] for chunk in chunks[1:])


def test_empty_text_yields_no_chunks():
    assert split_text("", 1000, 100) == []


@pytest.mark.parametrize("text", ["a", "short transcript", "x" * 1000])
def test_text_within_window_is_single_chunk(text):
    assert split_text(text, 1000, 100) == [text]


def test_windows_advance_by_length_minus_overlap():
    chunks = list(iter_chunks("abcdefghijklmnopqrstuvwxyz", 10, 3))

    assert [c.start for c in chunks] == [0, 7, 14, 21]
    assert [c.text for c in chunks] == [
        "abcdefghij",
        "hijklmnopq",
        "opqrstuvwx",
        "vwxyz",
    ]
    assert [c.index for c in chunks] == [0, 1, 2, 3]


def test_consecutive_chunks_share_overlap():
    text = "The quick brown fox jumps over the lazy dog. " * 40
    chunks = list(iter_chunks(text, 100, 20))

    for previous, current in zip(chunks, chunks[1:]):
        assert previous.end - current.start == 20
        assert previous.text[-20:] == current.text[:20]


def test_final_chunk_abuts_end_without_padding():
    text = "0123456789" * 25 + "tail"
    chunks = list(iter_chunks(text, 100, 10))

    assert chunks[-1].end == len(text)
    assert chunks[-1].text.endswith("tail")
    assert all(len(c.text) == 100 for c in chunks[:-1])
    assert len(chunks[-1].text) <= 100


@pytest.mark.parametrize(
    "length,max_length,overlap",
    [(1, 5, 0), (26, 10, 3), (250, 100, 10), (1001, 1000, 100), (3000, 1000, 100), (97, 7, 6)],
)
def test_dropping_overlaps_reconstructs_text(length, max_length, overlap):
    text = "".join(chr(ord("a") + i % 26) for i in range(length))
    chunks = split_text(text, max_length, overlap)

    assert _reconstruct(chunks, overlap) == text


def test_zero_overlap_partitions_text():
    assert split_text("abcdefgh", 3, 0) == ["abc", "def", "gh"]


@pytest.mark.parametrize(
    "max_length,overlap",
    [(100, 100), (100, 150), (0, 0), (-5, 0), (10, -1)],
)
def test_invalid_window_fails_fast(max_length, overlap):
    with pytest.raises(InvalidChunkConfigError) as exc_info:
        split_text("some transcript text", max_length, overlap)

    assert exc_info.value.max_length == max_length
    assert exc_info.value.overlap == overlap


def test_invalid_window_rejected_even_for_empty_text():
    with pytest.raises(InvalidChunkConfigError):
        split_text("", 10, 10)
