"""FastAPI application entry point."""

from contextlib import asynccontextmanager

import httpx
import uvicorn
from ddtrace import patch_all
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from condensify.config import AppConfig, load_config
from condensify.infrastructure import HuggingFaceSummarizer, SmtpMailer
from condensify.logging import setup_logging
from condensify.response_models import EmailResponse, SummaryResponse
from condensify.routes import email_router, health_router, summary_router

patch_all()

logger = setup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Builds the outbound clients once and closes them on shutdown."""
    config: AppConfig = app.state.config
    http_client = httpx.Client(timeout=config.huggingface.timeout_seconds)
    app.state.summarizer = HuggingFaceSummarizer(
        http_client,
        config.huggingface.model_url,
        config.huggingface.api_key,
    )
    app.state.mailer = SmtpMailer(config.smtp)
    logger.info(
        "Backend started",
        extra={
            "model_url": config.huggingface.model_url,
            "smtp_host": config.smtp.host,
            "chunk_max_length": config.chunking.max_length,
            "chunk_overlap": config.chunking.overlap,
        },
    )
    try:
        yield
    finally:
        http_client.close()
        logger.info("Backend stopped")


# Missing-input messages per route, matching the handlers' own checks
_MISSING_INPUT_MESSAGES = {
    "/api/summary": "Missing transcript",
    "/api/summary/upload": "Missing transcript",
    "/send-email": "Missing text or recipient",
}


def _describe_validation_error(path: str, errors: list[dict]) -> str:
    if not errors or any(error.get("type") == "missing" for error in errors):
        return _MISSING_INPUT_MESSAGES.get(path, "Missing request body")
    first = errors[0]
    field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    return f"Invalid request: {field or 'body'}: {first.get('msg', 'invalid value')}"


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Reports malformed request bodies in the {success, error} envelope."""
    path = request.url.path
    message = _describe_validation_error(path, exc.errors())
    logger.warning(
        "Request validation failed", extra={"path": path, "error": message}
    )
    if path == "/send-email":
        body = EmailResponse(success=False, error=message)
    else:
        body = SummaryResponse(success=False, error=message)
    return JSONResponse(status_code=200, content=body.model_dump())


def create_app(config: AppConfig | None = None) -> FastAPI:
    """Creates the FastAPI application."""
    config = config or load_config()

    app = FastAPI(title="Condensify Summary Backend", lifespan=lifespan)
    app.state.config = config
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.server.cors_allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.include_router(health_router)
    app.include_router(summary_router)
    app.include_router(email_router)
    return app


app = create_app()


def main():
    """Runs the backend under uvicorn."""
    config: AppConfig = app.state.config
    setup_logging(config.server.log_level)
    logger.info(
        "Starting summary backend",
        extra={"host": config.server.host, "port": config.server.port},
    )
    uvicorn.run(app, host=config.server.host, port=config.server.port, log_config=None)


if __name__ == "__main__":
    main()
