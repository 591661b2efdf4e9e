"""Application configuration loaded from environment variables."""

import os

from pydantic import BaseModel, Field, computed_field, model_validator


class ChunkingConfig(BaseModel, frozen=True):
    """Transcript windowing configuration."""

    max_length: int = Field(default=1000, gt=0)
    overlap: int = Field(default=100, ge=0)
    max_concurrency: int = Field(default=1, ge=1)

    @model_validator(mode="after")
    def _check_overlap(self) -> "ChunkingConfig":
        # A cursor step of zero or less never reaches the end of the text.
        if self.overlap >= self.max_length:
            raise ValueError(
                f"overlap ({self.overlap}) must be smaller than "
                f"max_length ({self.max_length})"
            )
        return self


class HuggingFaceConfig(BaseModel, frozen=True):
    """Hugging Face Inference API configuration."""

    api_key: str
    model_id: str = "philschmid/bart-large-cnn-samsum"
    api_base: str = "https://api-inference.huggingface.co/models"
    timeout_seconds: float | None = None

    @computed_field
    @property
    def model_url(self) -> str:
        """Returns the inference endpoint for the configured model."""
        return f"{self.api_base.rstrip('/')}/{self.model_id}"


class SmtpConfig(BaseModel, frozen=True):
    """Outbound mail configuration."""

    host: str
    port: int = 587
    user: str = ""
    password: str = ""
    subject: str = "📄 Condensify AI Summary"
    timeout_seconds: float = 30.0

    @computed_field
    @property
    def use_ssl(self) -> bool:
        """Port 465 speaks implicit TLS; other ports upgrade with STARTTLS."""
        return self.port == 465


class ServerConfig(BaseModel, frozen=True):
    """HTTP server configuration."""

    host: str = "0.0.0.0"
    port: int = 5000
    cors_allow_origins: list[str] = ["*"]
    log_level: str = "INFO"


class AppConfig(BaseModel, frozen=True):
    """Root application configuration."""

    chunking: ChunkingConfig
    huggingface: HuggingFaceConfig
    smtp: SmtpConfig
    server: ServerConfig


def _optional_float(value: str | None) -> float | None:
    return float(value) if value else None


def _split_origins(value: str) -> list[str]:
    return [origin.strip() for origin in value.split(",") if origin.strip()]


def load_config() -> AppConfig:
    """Loads configuration from environment variables."""
    return AppConfig(
        chunking=ChunkingConfig(
            max_length=int(os.getenv("CHUNK_MAX_LENGTH", "1000")),
            overlap=int(os.getenv("CHUNK_OVERLAP", "100")),
            max_concurrency=int(os.getenv("CHUNK_MAX_CONCURRENCY", "1")),
        ),
        huggingface=HuggingFaceConfig(
            api_key=os.getenv("HF_API_KEY", ""),
            model_id=os.getenv("HF_MODEL_ID", "philschmid/bart-large-cnn-samsum"),
            api_base=os.getenv(
                "HF_API_BASE", "https://api-inference.huggingface.co/models"
            ),
            timeout_seconds=_optional_float(os.getenv("HF_TIMEOUT_SECONDS")),
        ),
        smtp=SmtpConfig(
            host=os.getenv("EMAIL_HOST", "localhost"),
            port=int(os.getenv("EMAIL_PORT", "587")),
            user=os.getenv("EMAIL_USER", ""),
            password=os.getenv("EMAIL_PASS", ""),
        ),
        server=ServerConfig(
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "5000")),
            cors_allow_origins=_split_origins(os.getenv("CORS_ALLOW_ORIGINS", "*")),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        ),
    )
