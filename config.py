"""
Configuration management for the ILO Builder backend.

Centralizes all configuration using Pydantic settings with environment variable support.
"""

from typing import List, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field

from ilo.prompts.templates import (
    DEFAULT_ENHANCEMENT_SYSTEM_PROMPT,
    DEFAULT_ENHANCEMENT_USER_TEMPLATE,
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API Configuration
    api_host: str = Field(
        default="0.0.0.0",
        description="API server host"
    )
    api_port: int = Field(
        default=3001,
        description="API server port"
    )
    cors_allow_origins: List[str] = Field(
        default=["*"],
        description="Origins allowed to call the API from a browser"
    )

    # LLM Configuration
    openai_api_key: str = Field(
        default="",
        description="OpenAI / Azure OpenAI API key (required at runtime)"
    )
    azure_openai_endpoint: Optional[str] = Field(
        default=None,
        description="Azure OpenAI resource endpoint; plain OpenAI is used when unset"
    )
    openai_api_version: str = Field(
        default="2024-06-01",
        description="Azure OpenAI API version"
    )
    llm_model: str = Field(
        default="gpt-4o-mini",
        description="Model (or Azure deployment) used for enhancement"
    )
    llm_max_tokens: int = Field(
        default=400,
        description="Upper bound on generated tokens per enhancement"
    )
    llm_timeout_seconds: float = Field(
        default=60.0,
        description="Upstream request timeout in seconds"
    )

    # Prompt content
    enhancement_system_prompt: str = Field(
        default=DEFAULT_ENHANCEMENT_SYSTEM_PROMPT,
        description="System instruction sent with every enhancement request"
    )
    enhancement_user_template: str = Field(
        default=DEFAULT_ENHANCEMENT_USER_TEMPLATE,
        description="User message template; must contain a single {ilo} placeholder"
    )

    # Application Settings
    log_level: str = Field(
        default="INFO",
        description="Logging level"
    )
    environment: str = Field(
        default="development",
        description="Environment: development, staging, production"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get or create the global settings instance.

    Returns:
        Settings: Application settings
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings():
    """Reset the global settings instance (useful for testing)."""
    global _settings
    _settings = None


def validate_required_settings():
    """
    Validate that all required settings are present at runtime.

    Should be called after settings are loaded but before application starts.
    Raises ValueError if required settings are missing.
    """
    settings = get_settings()

    if not settings.openai_api_key:
        raise ValueError(
            "OPENAI_API_KEY environment variable is required but not set. "
            "Please ensure the secret is configured in your environment or .env file."
        )

    if "{ilo}" not in settings.enhancement_user_template:
        raise ValueError("ENHANCEMENT_USER_TEMPLATE must contain an {ilo} placeholder")

    return True
