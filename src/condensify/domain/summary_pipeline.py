"""Chunk, summarize and reassemble a transcript."""

from concurrent.futures import FIRST_EXCEPTION, ThreadPoolExecutor, wait

from condensify.config import ChunkingConfig
from condensify.domain.bullets import reassemble
from condensify.domain.chunker import split_text
from condensify.domain.models import SummaryResult
from condensify.exceptions import MissingInputError
from condensify.infrastructure.interfaces import SummarizerService
from condensify.logging import setup_logging

logger = setup_logging()


class SummaryPipeline:
    """Summarizes long transcripts window by window."""

    def __init__(self, summarizer: SummarizerService, config: ChunkingConfig):
        self._summarizer = summarizer
        self._config = config

    def run(self, transcript: str | None) -> SummaryResult:
        """
        Summarizes a transcript as a bulleted list.

        Args:
            transcript: The full transcript text.

        Returns:
            SummaryResult with the ordered partial summaries and bullet text.

        Raises:
            MissingInputError: If the transcript is missing or empty.
            SummarizationError: If any chunk fails to summarize.
        """
        if not transcript:
            raise MissingInputError(("transcript",), "Missing transcript")

        chunks = split_text(
            transcript, self._config.max_length, self._config.overlap
        )
        logger.info(
            "Transcript split into chunks",
            extra={
                "transcript_length": len(transcript),
                "chunk_count": len(chunks),
                "max_length": self._config.max_length,
                "overlap": self._config.overlap,
            },
        )

        partials = self.submit_all(chunks)
        bullet_summary = reassemble(partials)

        logger.info(
            "Transcript summarized",
            extra={
                "chunk_count": len(chunks),
                "empty_partials": sum(1 for p in partials if not p),
                "bullet_count": bullet_summary.count("\n") + 1 if bullet_summary else 0,
            },
        )

        return SummaryResult(
            chunk_count=len(chunks),
            partial_summaries=partials,
            bullet_summary=bullet_summary,
        )

    def submit_all(self, chunks: list[str]) -> list[str]:
        """
        Summarizes every chunk, keeping results in chunk order.

        With a concurrency bound of one, each call completes before the next is
        issued. The first failure aborts the run; nothing is retried.

        Raises:
            SummarizationError: If any chunk fails to summarize.
        """
        if self._config.max_concurrency <= 1 or len(chunks) <= 1:
            return [
                self._summarize_chunk(index, chunk)
                for index, chunk in enumerate(chunks)
            ]
        return self._submit_bounded(chunks)

    def _submit_bounded(self, chunks: list[str]) -> list[str]:
        partials = [""] * len(chunks)
        with ThreadPoolExecutor(max_workers=self._config.max_concurrency) as executor:
            futures = {
                executor.submit(self._summarize_chunk, index, chunk): index
                for index, chunk in enumerate(chunks)
            }
            done, pending = wait(futures, return_when=FIRST_EXCEPTION)
            for future in pending:
                future.cancel()
            for future in done:
                # result() re-raises the first failure
                partials[futures[future]] = future.result()
        return partials

    def _summarize_chunk(self, index: int, chunk: str) -> str:
        logger.debug(
            "Submitting chunk", extra={"chunk_index": index, "chunk_length": len(chunk)}
        )
        return self._summarizer.summarize(chunk) or ""
