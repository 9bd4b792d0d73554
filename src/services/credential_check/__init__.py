"""Credential check service module."""

from src.services.credential_check.router import router

__all__ = ["router"]
