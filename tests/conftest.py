# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-11-12
# Description: conftest.py
# -----------------------------------------------------------------------------

import json
import sys
from pathlib import Path
from typing import Callable, List

import httpx
import pytest

# add project root to sys.path
ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from openai import OpenAI  # noqa: E402

from config.Config import Config  # noqa: E402

TEST_BASE_URL = "https://embeddings.test/v1"
TEST_API_KEY = "sk-test-key"


def embedding_payload(vector: List[float]) -> dict:
    """Body shaped like a real /v1/embeddings response."""
    return {
        "object": "list",
        "data": [{"object": "embedding", "index": 0, "embedding": vector}],
        "model": "text-embedding-3-small",
        "usage": {"prompt_tokens": 3, "total_tokens": 3},
    }


class RecordingHandler:
    """
    httpx.MockTransport handler that remembers every request and answers
    with a fixed vector, or with whatever `respond` returns for a call number.
    """

    def __init__(self, respond: Callable[[int, httpx.Request], httpx.Response] | None = None):
        self.requests: List[httpx.Request] = []
        self.respond = respond

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        call_number = len(self.requests)
        if self.respond is not None:
            return self.respond(call_number, request)
        return httpx.Response(200, json=embedding_payload([0.1 * call_number, 0.2, 0.3]))

    @property
    def inputs(self) -> List[str]:
        return [json.loads(r.content)["input"] for r in self.requests]


@pytest.fixture
def cfg() -> Config:
    return Config(openai_api_key=TEST_API_KEY, openai_base_url=TEST_BASE_URL)


@pytest.fixture
def make_client():
    """Real OpenAI client whose HTTP layer is an httpx.MockTransport."""
    clients = []

    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> OpenAI:
        client = OpenAI(
            api_key=TEST_API_KEY,
            base_url=TEST_BASE_URL,
            max_retries=0,
            http_client=httpx.Client(transport=httpx.MockTransport(handler)),
        )
        clients.append(client)
        return client

    yield _make

    for c in clients:
        c.close()
