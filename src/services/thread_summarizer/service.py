"""Slack thread summarization service."""

import logging
from datetime import datetime, timezone
from typing import Optional, Sequence

import httpx

from src.core.slack import SlackClient, slack_client
from src.core.slack.models import Message
from src.llm import OpenAIClient
from src.services.thread_summarizer.models import (
    Language,
    SummaryRequest,
    SummaryResult,
    ThreadSummary,
)

logger = logging.getLogger(__name__)

SYSTEM_INSTRUCTIONS = {
    Language.ENGLISH.value: "Please respond in English",
    Language.TRADITIONAL_CHINESE.value: "請用繁體中文回答",
}


def build_transcript(messages: Sequence[Message]) -> str:
    """Render messages as ``<user>: <text>`` lines."""
    return "\n".join(f"{msg.user}: {msg.text}" for msg in messages)


def system_instruction_for(language: Optional[str]) -> str:
    """Pick the system instruction; unknown codes fall back to English."""
    return SYSTEM_INSTRUCTIONS.get(language, SYSTEM_INSTRUCTIONS[Language.ENGLISH.value])


def build_user_prompt(prompt: str, messages: Sequence[Message]) -> str:
    return f"{prompt}\n\nConversation:\n{build_transcript(messages)}"


class ThreadSummarizerService:
    """Fetches Slack threads and summarizes them with OpenAI."""

    def __init__(
        self,
        slack: Optional[SlackClient] = None,
        openai_http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.slack = slack or slack_client
        self._openai_http_client = openai_http_client

    def _openai_client(self, credential: str) -> OpenAIClient:
        return OpenAIClient(api_key=credential, http_client=self._openai_http_client)

    async def fetch_thread(self, thread_reference: str, access_token: str) -> list[Message]:
        """Fetch the messages of a Slack thread."""
        return await self.slack.fetch_thread(thread_reference, access_token)

    async def request_summary(self, request: SummaryRequest, credential: str) -> SummaryResult:
        """
        Ask the model for a summary of the given messages.

        Args:
            request: Messages, prompt, language and optional temperature
            credential: OpenAI API key

        Returns:
            SummaryResult whose content is None when the model gave no answer
        """
        system_instruction = system_instruction_for(request.language)
        user_prompt = build_user_prompt(request.prompt, request.messages)

        llm_client = self._openai_client(credential)
        try:
            content = await llm_client.generate_content(
                prompt=user_prompt,
                system_instruction=system_instruction,
                temperature=request.temperature,
            )
        finally:
            await llm_client.aclose()

        logger.info(
            f"Summarized {len(request.messages)} messages "
            f"(language={request.language}, has_content={content is not None})"
        )
        return SummaryResult(content=content)

    async def generate_summary(
        self,
        messages: Sequence[Message],
        credential: str,
        prompt: str,
        language: Optional[str] = None,
        temperature: Optional[float] = None,
    ) -> str:
        """Generate a summary, returning an empty string when there is no answer."""
        request = SummaryRequest(
            messages=list(messages),
            prompt=prompt,
            language=language,
            temperature=temperature,
        )
        result = await self.request_summary(request, credential)
        return result.text

    async def summarize_thread(
        self,
        thread_reference: str,
        slack_token: str,
        openai_token: str,
        prompt: str,
        language: Optional[str] = None,
        temperature: Optional[float] = None,
    ) -> ThreadSummary:
        """Fetch a thread and summarize it."""
        messages = await self.fetch_thread(thread_reference, slack_token)

        result = await self.request_summary(
            SummaryRequest(
                messages=messages,
                prompt=prompt,
                language=language,
                temperature=temperature,
            ),
            openai_token,
        )

        return ThreadSummary(
            messages=messages,
            result=result,
            generated_at=datetime.now(timezone.utc),
        )


# Singleton instance
thread_summarizer = ThreadSummarizerService()
