"""Unit tests for the Hugging Face inference client."""

import json

import httpx
import pytest

from condensify.exceptions import SummarizationError
from condensify.infrastructure import HuggingFaceSummarizer

MODEL_URL = "https://api-inference.huggingface.co/models/philschmid/bart-large-cnn-samsum"


def _summarizer(handler) -> HuggingFaceSummarizer:
    client = httpx.Client(transport=httpx.MockTransport(handler))
    return HuggingFaceSummarizer(client, MODEL_URL, "hf_secret")


def test_posts_inputs_with_bearer_token():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        seen["auth"] = request.headers["Authorization"]
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json=[{"summary_text": "Team agreed on dates."}])

    result = _summarizer(handler).summarize("chunk of transcript")

    assert result == "Team agreed on dates."
    assert seen == {
        "url": MODEL_URL,
        "auth": "Bearer hf_secret",
        "body": {"inputs": "chunk of transcript"},
    }


def test_falls_back_to_generated_text():
    summarizer = _summarizer(
        lambda request: httpx.Response(200, json=[{"generated_text": "Generated."}])
    )

    assert summarizer.summarize("text") == "Generated."


@pytest.mark.parametrize(
    "payload",
    [[], [{}], [{"summary_text": ""}], {"unexpected": "shape"}, ["not a dict"]],
)
def test_missing_summary_is_empty_string(payload):
    summarizer = _summarizer(lambda request: httpx.Response(200, json=payload))

    assert summarizer.summarize("text") == ""


def test_error_status_raises_with_response_body():
    summarizer = _summarizer(
        lambda request: httpx.Response(503, text='{"error":"Model is loading"}')
    )

    with pytest.raises(SummarizationError) as exc_info:
        summarizer.summarize("text")

    assert str(exc_info.value) == 'HuggingFace API error: {"error":"Model is loading"}'


def test_transport_error_raises_summarization_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(SummarizationError) as exc_info:
        _summarizer(handler).summarize("text")

    assert isinstance(exc_info.value.cause, httpx.ConnectError)


def test_invalid_json_raises_summarization_error():
    summarizer = _summarizer(lambda request: httpx.Response(200, text="<html>"))

    with pytest.raises(SummarizationError, match="invalid JSON"):
        summarizer.summarize("text")
