from __future__ import annotations

import os
from typing import Generator

import pytest

# Tracing must be disabled before condensify.main calls patch_all()
os.environ.setdefault("DD_TRACE_ENABLED", "false")
os.environ.setdefault("DD_INSTRUMENTATION_TELEMETRY_ENABLED", "false")

from fastapi.testclient import TestClient  # noqa: E402

from condensify.config import (  # noqa: E402
    AppConfig,
    ChunkingConfig,
    HuggingFaceConfig,
    ServerConfig,
    SmtpConfig,
)
from condensify.dependencies import get_mailer, get_summarizer  # noqa: E402
from condensify.main import create_app  # noqa: E402
from tests.fakes import FakeMailer, FakeSummarizer  # noqa: E402


@pytest.fixture()
def app_config() -> AppConfig:
    return AppConfig(
        chunking=ChunkingConfig(max_length=20, overlap=5),
        huggingface=HuggingFaceConfig(api_key="hf_test"),
        smtp=SmtpConfig(host="smtp.test", port=587, user="bot@test", password="pw"),
        server=ServerConfig(),
    )


@pytest.fixture()
def summarizer() -> FakeSummarizer:
    return FakeSummarizer()


@pytest.fixture()
def mailer() -> FakeMailer:
    return FakeMailer()


@pytest.fixture()
def client(app_config, summarizer, mailer) -> Generator[TestClient, None, None]:
    app = create_app(app_config)
    app.dependency_overrides[get_summarizer] = lambda: summarizer
    app.dependency_overrides[get_mailer] = lambda: mailer
    test_client = TestClient(app)
    try:
        yield test_client
    finally:
        test_client.close()
