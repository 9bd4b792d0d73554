"""FastAPI router for thread summarizer endpoints."""

import logging

from fastapi import APIRouter

from src.services.thread_summarizer import service
from src.services.thread_summarizer.models import SummarizeRequest, SummarizeResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/slack", tags=["thread-summarizer"])


@router.post("/summarize", response_model=SummarizeResponse)
async def summarize_thread(request: SummarizeRequest) -> SummarizeResponse:
    """
    Fetch a Slack thread and summarize it.

    Slack and OpenAI failures are not handled here; the application maps
    them to a generic error response.
    """
    summary = await service.thread_summarizer.summarize_thread(
        thread_reference=str(request.thread_url),
        slack_token=request.slack_token,
        openai_token=request.openai_token,
        prompt=request.prompt or "",
        language=request.language.value,
        temperature=request.temperature,
    )

    logger.info(
        f"Summarized thread {request.thread_url}: "
        f"{len(summary.messages)} messages, has_content={summary.result.has_content}"
    )

    return SummarizeResponse(
        summary=summary.result.text,
        has_content=summary.result.has_content,
        messages=summary.messages,
        messages_analyzed=len(summary.messages),
        generated_at=summary.generated_at,
    )
