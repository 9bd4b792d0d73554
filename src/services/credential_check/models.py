"""Pydantic models for credential check endpoints."""

from pydantic import BaseModel

from src.core.credentials import CredentialStatus


class TokenCheckRequest(BaseModel):
    """Request model for a token check."""

    token: str


class TokenCheckResponse(BaseModel):
    """Response model for a token check."""

    valid: bool
    status: CredentialStatus
