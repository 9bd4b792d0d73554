"""Slack Web API HTTP client."""

import logging
from typing import Optional

import httpx

from src.core.config import settings
from src.core.credentials import CredentialStatus
from src.core.slack.models import Message, ThreadReference

logger = logging.getLogger(__name__)


class SlackAPIError(Exception):
    """Exception raised when Slack answers with ``ok: false``."""

    def __init__(self, method: str, error: str):
        self.method = method
        self.error = error
        super().__init__(f"Slack API {method} failed: {error}")


class SlackClient:
    """HTTP client for the Slack Web API.

    Tokens are passed per call; the client itself holds no credentials.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url or settings.slack_api_base_url
        self._transport = transport

    def _get_client(self, token: str) -> httpx.AsyncClient:
        """Create an async HTTP client authenticated with a bearer token."""
        return httpx.AsyncClient(
            base_url=self.base_url,
            headers={"Authorization": f"Bearer {token}"},
            timeout=settings.http_timeout,
            transport=self._transport,
        )

    async def fetch_thread(self, thread_reference: str, access_token: str) -> list[Message]:
        """
        Fetch the messages of a thread via ``conversations.replies``.

        Only the first page of replies is read. Messages are returned in the
        order Slack sends them.

        Args:
            thread_reference: Slack permalink to the thread's root message
            access_token: Slack bot or user token

        Returns:
            List of messages with ``ts`` copied verbatim into ``timestamp``

        Raises:
            InvalidThreadReferenceError: If the URL is not a Slack permalink
            httpx.HTTPError: On transport failure or non-2xx status
            SlackAPIError: If Slack reports ``ok: false``
        """
        if not access_token:
            raise ValueError("Slack access token is required")

        reference = ThreadReference.from_url(thread_reference)

        async with self._get_client(access_token) as client:
            response = await client.get(
                "/conversations.replies",
                params={
                    "channel": reference.channel_id,
                    "ts": reference.thread_ts,
                    "limit": settings.slack_replies_limit,
                },
            )
            response.raise_for_status()
            data = response.json()

        if data.get("ok") is False:
            raise SlackAPIError("conversations.replies", data.get("error", "unknown_error"))

        messages = [Message.from_slack(item) for item in data["messages"]]
        logger.info(
            f"Fetched {len(messages)} messages from thread "
            f"{reference.channel_id}/{reference.thread_ts}"
        )
        return messages

    async def check_token(self, token: str) -> CredentialStatus:
        """
        Check a token against ``auth.test``.

        Returns:
            VALID if Slack answers ``ok: true``, INVALID if it answers
            ``ok: false``, CHECK_FAILED on any other outcome
        """
        try:
            async with self._get_client(token) as client:
                response = await client.post(
                    "/auth.test",
                    headers={"Content-Type": "application/json"},
                )
                response.raise_for_status()
                data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.warning(f"Slack token check failed: {e}")
            return CredentialStatus.CHECK_FAILED

        if not isinstance(data, dict) or not isinstance(data.get("ok"), bool):
            logger.warning(f"Unexpected auth.test response: {data!r}")
            return CredentialStatus.CHECK_FAILED

        if data["ok"]:
            return CredentialStatus.VALID

        logger.info(f"Slack rejected token: {data.get('error', 'unknown_error')}")
        return CredentialStatus.INVALID

    async def validate_token(self, token: str) -> bool:
        """Return True only if the token is confirmed valid."""
        return (await self.check_token(token)).is_valid


# Singleton instance for dependency injection
slack_client = SlackClient()
