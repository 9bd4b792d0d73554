"""Slack Web API integration."""

from src.core.slack.client import SlackAPIError, SlackClient, slack_client
from src.core.slack.models import InvalidThreadReferenceError, Message, ThreadReference

__all__ = [
    "InvalidThreadReferenceError",
    "Message",
    "SlackAPIError",
    "SlackClient",
    "ThreadReference",
    "slack_client",
]
