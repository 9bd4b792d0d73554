"""LLM integrations for the Slack summariser."""

from src.llm.openai import OpenAIClient

__all__ = ["OpenAIClient"]
