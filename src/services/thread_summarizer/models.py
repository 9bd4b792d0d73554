"""Pydantic models for thread summarizer service."""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, HttpUrl

from src.core.config import settings
from src.core.slack.models import Message


class Language(str, Enum):
    """Languages a summary can be written in."""

    ENGLISH = "en"
    TRADITIONAL_CHINESE = "zh-Hant"


class SummaryResult(BaseModel):
    """Model output for one summary request.

    ``content`` is None when the provider returned no choices or no content,
    which is distinct from an empty answer.
    """

    model_config = ConfigDict(frozen=True)

    content: Optional[str] = None

    @property
    def has_content(self) -> bool:
        return self.content is not None

    @property
    def text(self) -> str:
        return self.content or ""


class SummaryRequest(BaseModel):
    """Everything the generator needs besides the credential."""

    model_config = ConfigDict(frozen=True)

    messages: list[Message]
    prompt: str
    language: Optional[str] = Language.ENGLISH.value
    temperature: Optional[float] = None


class ThreadSummary(BaseModel):
    """Output of the fetch-then-summarize pipeline."""

    messages: list[Message]
    result: SummaryResult
    generated_at: datetime


class SummarizeRequest(BaseModel):
    """Request model for thread summarization."""

    thread_url: HttpUrl
    slack_token: str = Field(min_length=1)
    openai_token: str = Field(min_length=1)
    language: Language = Language(settings.default_language)
    temperature: float = Field(default=settings.default_temperature, ge=0, le=2)
    prompt: Optional[str] = settings.default_prompt


class SummarizeResponse(BaseModel):
    """Response model for thread summarization."""

    summary: str
    has_content: bool
    messages: list[Message]
    messages_analyzed: int
    generated_at: datetime
