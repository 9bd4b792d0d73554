"""FastAPI router for advisory credential checks."""

import logging

from fastapi import APIRouter

from src.core import slack
from src.llm import OpenAIClient
from src.services.credential_check.models import TokenCheckRequest, TokenCheckResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["credential-check"])


@router.post("/slack/validate-token", response_model=TokenCheckResponse)
async def validate_slack_token(request: TokenCheckRequest) -> TokenCheckResponse:
    """Check a Slack token against auth.test."""
    status = await slack.slack_client.check_token(request.token)
    logger.info(f"Slack token check: {status.value}")
    return TokenCheckResponse(valid=status.is_valid, status=status)


@router.post("/openai/validate-token", response_model=TokenCheckResponse)
async def validate_openai_token(request: TokenCheckRequest) -> TokenCheckResponse:
    """Check an OpenAI API key against the model listing endpoint."""
    status = await OpenAIClient(api_key=request.token).check_api_key()
    logger.info(f"OpenAI API key check: {status.value}")
    return TokenCheckResponse(valid=status.is_valid, status=status)
