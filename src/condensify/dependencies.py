"""FastAPI dependency injection configuration."""

from typing import Annotated

from fastapi import Depends, Request

from condensify.config import AppConfig
from condensify.domain import SummaryPipeline
from condensify.infrastructure.interfaces import Mailer, SummarizerService


def get_config(request: Request) -> AppConfig:
    """Returns the configuration the application was created with."""
    return request.app.state.config


def get_summarizer(request: Request) -> SummarizerService:
    """Returns the summarizer built at start-up."""
    return request.app.state.summarizer


def get_mailer(request: Request) -> Mailer:
    """Returns the mail transport built at start-up."""
    return request.app.state.mailer


def get_summary_pipeline(
    summarizer: Annotated[SummarizerService, Depends(get_summarizer)],
    config: Annotated[AppConfig, Depends(get_config)],
) -> SummaryPipeline:
    """Creates a request-scoped pipeline around the shared summarizer."""
    return SummaryPipeline(summarizer, config.chunking)
