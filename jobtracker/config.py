"""
JobTracker - Application configuration.

Centralized configuration using Pydantic Settings for environment variable management.

Environment Variables:
    All settings can be overridden via environment variables with JOBTRACKER_ prefix.

    AI Settings:
        JOBTRACKER_AI_ENABLED=true           - Toggle AI job analysis
        JOBTRACKER_OPENAI_API_KEY=...        - API key (plain OPENAI_API_KEY also works)
        JOBTRACKER_OPENAI_BASE_URL=...       - Any OpenAI-compatible endpoint
        JOBTRACKER_OPENAI_MODEL=...          - Model to use (e.g., gpt-3.5-turbo)

    App Settings:
        JOBTRACKER_SEED_SAMPLE_JOBS=true     - Insert demo jobs on startup
"""
from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings
from typing import Optional


class AISettings(BaseSettings):
    """
    AI/OpenAI API configuration settings.

    The base URL can point at any server speaking the OpenAI
    chat completions protocol (OpenAI, Groq, a local proxy).
    """
    ai_enabled: bool = True
    openai_api_key: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("JOBTRACKER_OPENAI_API_KEY", "OPENAI_API_KEY"),
    )
    openai_base_url: str = "https://api.openai.com/v1"
    openai_model: str = "gpt-3.5-turbo"
    ai_temperature: float = 0.3
    ai_max_tokens: int = 500
    ai_request_timeout: float = 60.0

    class Config:
        env_prefix = "JOBTRACKER_"
        env_file = ".env"
        extra = "ignore"
        populate_by_name = True


class Settings(BaseSettings):
    """Combined application settings."""
    ai: AISettings = AISettings()

    # CORS allowed origins (comma-separated, e.g. "http://localhost:3000,https://myapp.com")
    allowed_origins: str = "*"

    # Jobs live in memory only; these are the demo records shown on first load
    seed_sample_jobs: bool = True

    log_level: str = "INFO"

    class Config:
        env_prefix = "JOBTRACKER_"
        env_file = ".env"
        extra = "ignore"


# Global settings instance
settings = Settings()
