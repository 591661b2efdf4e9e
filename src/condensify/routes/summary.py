"""Transcript summarization endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, UploadFile

from condensify.dependencies import get_summary_pipeline
from condensify.domain import SummaryPipeline
from condensify.exceptions import (
    InvalidUploadError,
    MissingInputError,
    SummarizationError,
)
from condensify.logging import setup_logging
from condensify.request_models import SummaryRequest
from condensify.response_models import SummaryResponse

logger = setup_logging()

router = APIRouter(prefix="/api/summary", tags=["summary"])

PipelineDep = Annotated[SummaryPipeline, Depends(get_summary_pipeline)]

_TEXT_CONTENT_TYPES = {"text/plain"}


def _summarize(pipeline: SummaryPipeline, transcript: str | None) -> SummaryResponse:
    try:
        result = pipeline.run(transcript)
    except MissingInputError as e:
        logger.warning("Summary request rejected", extra={"fields": list(e.fields)})
        return SummaryResponse(success=False, error=str(e))
    except SummarizationError as e:
        # Traceback already logged by the summarizer adapter
        logger.error("Summary error", extra={"error": str(e)})
        return SummaryResponse(success=False, error=str(e))
    except Exception as e:
        logger.exception("Summary error")
        return SummaryResponse(success=False, error=str(e))
    return SummaryResponse(success=True, summary=result.bullet_summary)


@router.post("", response_model=SummaryResponse)
def create_summary(request: SummaryRequest, pipeline: PipelineDep) -> SummaryResponse:
    """
    Summarizes a transcript into bullet points.

    Failures are reported in the response body rather than as HTTP errors.
    """
    logger.info(
        "Received summary request",
        extra={
            "transcript_length": len(request.transcript or ""),
            "has_prompt": bool(request.prompt),
        },
    )
    return _summarize(pipeline, request.transcript)


@router.post("/upload", response_model=SummaryResponse)
def create_summary_from_file(file: UploadFile, pipeline: PipelineDep) -> SummaryResponse:
    """Summarizes an uploaded plain-text transcript."""
    logger.info(
        "Received transcript upload",
        extra={"file_name": file.filename, "content_type": file.content_type},
    )
    try:
        transcript = _read_transcript(file)
    except InvalidUploadError as e:
        logger.warning("Transcript upload rejected", extra={"reason": e.reason})
        return SummaryResponse(success=False, error=str(e))
    return _summarize(pipeline, transcript)


def _read_transcript(file: UploadFile) -> str:
    content_type = (file.content_type or "").split(";")[0].strip()
    if content_type not in _TEXT_CONTENT_TYPES:
        raise InvalidUploadError(file.filename, "file must be a text/plain file")
    try:
        return file.file.read().decode("utf-8")
    except UnicodeDecodeError as e:
        raise InvalidUploadError(file.filename, "file is not valid UTF-8") from e
