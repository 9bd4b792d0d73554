"""Thread summarizer service module."""

from src.services.thread_summarizer.router import router
from src.services.thread_summarizer.service import thread_summarizer

__all__ = ["router", "thread_summarizer"]
