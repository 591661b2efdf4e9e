"""Reassembles partial summaries into a bulleted list."""

import re

# A sentence ends at ., ! or ? followed by whitespace; the whitespace is dropped.
# Abbreviations and decimals ("e.g. this", "3. 5") split here too.
_SENTENCE_BOUNDARY = re.compile(r"(?<=[.!?])\s+")
_LEADING_MARKER = re.compile(r"^[-*]\s*")
_MIN_SENTENCE_LENGTH = 4


def join_partials(partials: list[str]) -> str:
    """Joins non-empty partial summaries with single spaces, in order."""
    return " ".join(partial for partial in partials if partial)


def split_sentences(text: str) -> list[str]:
    return _SENTENCE_BOUNDARY.split(text)


def format_as_bullets(text: str) -> str:
    """
    Renders each sentence of ``text`` as a ``- `` bullet line.

    Fragments of three characters or fewer (after trimming) are dropped, and a
    bullet marker the model already emitted is replaced rather than doubled.
    Returns an empty string when no sentence survives.
    """
    lines = []
    for sentence in split_sentences(text):
        sentence = sentence.strip()
        if len(sentence) < _MIN_SENTENCE_LENGTH:
            continue
        lines.append(f"- {_LEADING_MARKER.sub('', sentence, count=1)}")
    return "\n".join(lines)


def reassemble(partials: list[str]) -> str:
    """Joins partial summaries and formats the result as bullets."""
    return format_as_bullets(join_partials(partials))
