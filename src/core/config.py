"""Application configuration using Pydantic Settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "slack-summariser"
    debug: bool = False
    log_level: str = "INFO"

    # HTTP
    http_timeout: float = 30.0

    # Slack Web API
    slack_api_base_url: str = "https://slack.com/api"
    slack_replies_limit: int = 1000

    # OpenAI Configuration
    openai_base_url: str = "https://api.openai.com/v1"
    openai_model: str = "gpt-3.5-turbo"

    # Summary defaults (used by the HTTP API when fields are omitted)
    default_prompt: str = "Please summarise this Slack thread conversation"
    default_language: str = "en"
    default_temperature: float = 0.7


settings = Settings()
