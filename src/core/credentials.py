"""Credential check outcomes shared by the Slack and OpenAI clients."""

from enum import Enum


class CredentialStatus(str, Enum):
    """Result of an advisory credential check.

    ``CHECK_FAILED`` covers transport errors, unexpected status codes and
    malformed responses, so a flaky network is not reported as a bad token.
    """

    VALID = "valid"
    INVALID = "invalid"
    CHECK_FAILED = "check_failed"

    @property
    def is_valid(self) -> bool:
        return self is CredentialStatus.VALID
