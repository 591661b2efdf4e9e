"""Hugging Face Inference API summarizer implementation."""

from typing import Any

import httpx

from condensify.exceptions import SummarizationError
from condensify.infrastructure.interfaces import SummarizerService
from condensify.logging import setup_logging

logger = setup_logging()


class HuggingFaceSummarizer(SummarizerService):
    """Summarizer backed by a hosted Hugging Face summarization model."""

    def __init__(self, client: httpx.Client, model_url: str, api_key: str):
        self._client = client
        self._model_url = model_url
        self._api_key = api_key

    def summarize(self, text: str) -> str:
        """
        Sends one chunk to the inference endpoint and returns its summary.

        Args:
            text: The chunk to summarize.

        Returns:
            The first candidate's summary_text (or generated_text), or an
            empty string when the response carries neither.

        Raises:
            SummarizationError: On a non-success response or transport failure.
        """
        try:
            response = self._client.post(
                self._model_url,
                headers={"Authorization": f"Bearer {self._api_key}"},
                json={"inputs": text},
            )
        except httpx.HTTPError as e:
            logger.exception(
                "HuggingFace request failed", extra={"model_url": self._model_url}
            )
            raise SummarizationError(f"HuggingFace request failed: {e}", cause=e) from e

        if not response.is_success:
            logger.error(
                "HuggingFace API returned an error",
                extra={
                    "model_url": self._model_url,
                    "status_code": response.status_code,
                },
            )
            raise SummarizationError(f"HuggingFace API error: {response.text}")

        try:
            payload = response.json()
        except ValueError as e:
            raise SummarizationError(
                f"HuggingFace API returned invalid JSON: {response.text}", cause=e
            ) from e

        summary = self._extract_summary(payload)
        if not summary:
            logger.warning(
                "HuggingFace returned no summary", extra={"input_length": len(text)}
            )
        return summary

    @staticmethod
    def _extract_summary(payload: Any) -> str:
        """Picks the first candidate's text out of an inference response."""
        if not isinstance(payload, list) or not payload:
            return ""
        first = payload[0]
        if not isinstance(first, dict):
            return ""
        return first.get("summary_text") or first.get("generated_text") or ""
