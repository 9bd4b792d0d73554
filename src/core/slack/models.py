"""Pydantic models for Slack Web API payloads."""

import re
from typing import Optional
from urllib.parse import parse_qs, urlparse

from pydantic import BaseModel, ConfigDict


class InvalidThreadReferenceError(ValueError):
    """Raised when a URL does not point at a Slack message."""

    pass


# Matches: /archives/C0123ABC/p1700000000123456
PERMALINK_PATH_PATTERN = re.compile(r"^/archives/(?P<channel>[A-Z0-9]+)/p(?P<digits>\d+)/?$")


class Message(BaseModel):
    """A single message in a Slack thread."""

    model_config = ConfigDict(frozen=True)

    user: str
    text: str
    timestamp: str  # Slack "ts", e.g. "1700000000.123456", kept verbatim

    @classmethod
    def from_slack(cls, payload: dict) -> "Message":
        """Build a message from a ``conversations.replies`` entry."""
        return cls(
            user=payload.get("user", ""),
            text=payload.get("text", ""),
            timestamp=payload["ts"],
        )


class ThreadReference(BaseModel):
    """Channel and root timestamp identifying a Slack thread."""

    model_config = ConfigDict(frozen=True)

    channel_id: str
    thread_ts: str

    @classmethod
    def from_url(cls, url: str) -> "ThreadReference":
        """
        Parse a Slack message permalink.

        Supported form: ``https://<workspace>.slack.com/archives/<channel>/p<digits>``.
        The timestamp is the digits with a dot before the last six. Permalinks
        to replies carry the root in ``thread_ts`` (and optionally ``cid``),
        which take precedence over the path.

        Raises:
            InvalidThreadReferenceError: If the URL is not a Slack permalink
        """
        parsed = urlparse(url.strip())
        host = (parsed.hostname or "").lower()

        if parsed.scheme not in ("http", "https") or not (
            host == "slack.com" or host.endswith(".slack.com")
        ):
            raise InvalidThreadReferenceError(f"Not a Slack URL: {url}")

        match = PERMALINK_PATH_PATTERN.match(parsed.path)
        if not match:
            raise InvalidThreadReferenceError(f"Not a Slack message permalink: {url}")

        digits = match.group("digits").rjust(7, "0")
        channel_id = match.group("channel")
        thread_ts = f"{digits[:-6]}.{digits[-6:]}"

        query = parse_qs(parsed.query)
        query_ts = _first(query, "thread_ts")
        query_channel = _first(query, "cid")
        if query_ts:
            thread_ts = query_ts
        if query_channel:
            channel_id = query_channel

        return cls(channel_id=channel_id, thread_ts=thread_ts)


def _first(query: dict[str, list[str]], key: str) -> Optional[str]:
    values = query.get(key)
    return values[0] if values else None
