"""Shared fixtures: mocked Slack and OpenAI HTTP endpoints."""

import json
from typing import Callable, Optional

import httpx
import pytest

from src.core.slack import SlackClient
from src.llm import OpenAIClient
from src.services.thread_summarizer.service import ThreadSummarizerService

THREAD_URL = "https://x.slack.com/archives/C1/p123"

SLACK_MESSAGES = [
    {"user": "alice", "text": "hi", "ts": "1"},
    {"user": "bob", "text": "yo", "ts": "2"},
]


def chat_completion(content: Optional[str] = "A short summary.", choices: bool = True) -> dict:
    """Build a chat.completion response body."""
    return {
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "created": 1700000000,
        "model": "gpt-3.5-turbo",
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": content},
                "finish_reason": "stop",
            }
        ]
        if choices
        else [],
    }


class RecordingTransport:
    """Collects requests and answers them with a handler."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.requests: list[httpx.Request] = []
        self._handler = handler

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._handler(request)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)

    def json_bodies(self) -> list[dict]:
        return [json.loads(request.content) for request in self.requests]


@pytest.fixture
def slack_ok() -> RecordingTransport:
    return RecordingTransport(
        lambda request: httpx.Response(200, json={"ok": True, "messages": SLACK_MESSAGES})
    )


@pytest.fixture
def openai_ok() -> RecordingTransport:
    return RecordingTransport(lambda request: httpx.Response(200, json=chat_completion()))


def make_slack_client(recorder: RecordingTransport) -> SlackClient:
    return SlackClient(transport=recorder.transport)


def make_openai_client(recorder: RecordingTransport, api_key: str = "sk-test") -> OpenAIClient:
    return OpenAIClient(
        api_key=api_key,
        http_client=httpx.AsyncClient(transport=recorder.transport),
    )


def make_summarizer(
    slack_recorder: RecordingTransport, openai_recorder: RecordingTransport
) -> ThreadSummarizerService:
    return ThreadSummarizerService(
        slack=make_slack_client(slack_recorder),
        openai_http_client=httpx.AsyncClient(transport=openai_recorder.transport),
    )
