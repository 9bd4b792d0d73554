"""OpenAI LLM client."""

import logging
from typing import Optional

import httpx
from openai import AsyncOpenAI

from src.core.config import settings
from src.core.credentials import CredentialStatus

logger = logging.getLogger(__name__)

REJECTED_STATUS_CODES = (401, 403)


class OpenAIClient:
    """Client for the OpenAI chat completion API bound to one API key.

    Keys are supplied by the caller per request, so a client is created for
    each key and closed once the request is done.
    """

    def __init__(
        self,
        api_key: str,
        model: Optional[str] = None,
        base_url: Optional[str] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.api_key = api_key
        self.model = model or settings.openai_model
        self.base_url = base_url or settings.openai_base_url
        self._http_client = http_client
        self._client: Optional[AsyncOpenAI] = None

    @property
    def client(self) -> AsyncOpenAI:
        """Lazy initialization of OpenAI client."""
        if self._client is None:
            if not self.api_key:
                raise ValueError("OpenAI API key is required")
            self._client = AsyncOpenAI(
                api_key=self.api_key,
                base_url=self.base_url,
                timeout=settings.http_timeout,
                max_retries=0,
                http_client=self._http_client,
            )
        return self._client

    async def generate_content(
        self,
        prompt: str,
        system_instruction: Optional[str] = None,
        temperature: Optional[float] = None,
    ) -> Optional[str]:
        """
        Request a single non-streaming chat completion.

        Args:
            prompt: User message content
            system_instruction: Optional system message content
            temperature: Sampling temperature, forwarded as-is; provider
                default when None

        Returns:
            Content of the first choice, or None if the response has no
            choices or the content is missing
        """
        messages = []

        if system_instruction:
            messages.append({"role": "system", "content": system_instruction})

        messages.append({"role": "user", "content": prompt})

        params: dict = {"model": self.model, "messages": messages}
        if temperature is not None:
            params["temperature"] = temperature

        response = await self.client.chat.completions.create(**params)

        if not response.choices:
            logger.warning("Chat completion returned no choices")
            return None

        content = response.choices[0].message.content
        logger.debug(f"Generated content with {len(content or '')} characters")
        return content

    async def check_api_key(self) -> CredentialStatus:
        """
        Check the API key by listing models.

        Returns:
            VALID on HTTP 200, INVALID on 401/403, CHECK_FAILED otherwise
        """
        url = f"{self.base_url.rstrip('/')}/models"
        headers = {"Authorization": f"Bearer {self.api_key}"}

        try:
            if self._http_client is not None:
                response = await self._http_client.get(url, headers=headers)
            else:
                async with httpx.AsyncClient(timeout=settings.http_timeout) as client:
                    response = await client.get(url, headers=headers)
        except (httpx.HTTPError, ValueError) as e:
            logger.warning(f"OpenAI API key check failed: {e}")
            return CredentialStatus.CHECK_FAILED

        if response.status_code == 200:
            return CredentialStatus.VALID
        if response.status_code in REJECTED_STATUS_CODES:
            logger.info(f"OpenAI rejected API key with status {response.status_code}")
            return CredentialStatus.INVALID

        logger.warning(f"OpenAI API key check returned status {response.status_code}")
        return CredentialStatus.CHECK_FAILED

    async def validate_api_key(self) -> bool:
        """Return True only if the API key is confirmed valid."""
        return (await self.check_api_key()).is_valid

    async def aclose(self) -> None:
        """Close the underlying SDK client unless the HTTP client was injected."""
        if self._client is not None and self._http_client is None:
            await self._client.close()
        self._client = None
