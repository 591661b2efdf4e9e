"""Abstract interface for text summarization backends."""

from abc import ABC, abstractmethod


class SummarizerService(ABC):
    """Abstract base class for summarization backends."""

    @abstractmethod
    def summarize(self, text: str) -> str:
        """
        Summarizes a piece of text.

        Args:
            text: The text to summarize, at most one chunk long.

        Returns:
            The summary, or an empty string when the backend produced none.

        Raises:
            SummarizationError: If the backend call fails.
        """
        pass
