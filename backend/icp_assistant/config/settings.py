# /icp_assistant/config/settings.py

import sys
from typing import List
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # AI APIs (used only by the text classifier; both are optional)
    gemini_api_key: str | None = None
    gemini_model: str = "gemini-2.5-flash"
    openai_api_key: str | None = None
    openai_model: str = "gpt-4o-mini"
    classifier_timeout_seconds: float = 8.0

    # Redis (conversation answers and keyword cache)
    redis_url: str = "redis://localhost:6379"
    conversation_ttl_seconds: int = 60 * 60 * 24 * 7
    keyword_cache_ttl_seconds: int = 60 * 60 * 24 * 30

    # Security
    api_key: str | None = None

    # Deployment
    workers: int = 4
    environment: str = "production"
    log_level: str = "INFO"
    request_timeout_seconds: float = 30.0

    cors_allowed_origins: List[str] = Field(default=["http://localhost:3000"])

    allowed_hosts: str = "localhost,127.0.0.1"

    # App Metadata & Limits
    api_version: str = "v1"
    rate_limit_per_minute: int = 100

    # Onboarding flow
    max_answer_length: int = 10000

    # ---------------- Validators ---------------- #

    @field_validator("cors_allowed_origins", mode="before")
    @classmethod
    def parse_cors_allowed_origins(cls, v):
        """
        Accept both comma-separated strings and lists for cors_allowed_origins.
        """
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.upper()

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


VALID_ENVIRONMENTS = {"development", "test", "staging", "production"}


def validate_environment(settings_obj: Settings):
    try:
        if settings_obj.environment not in VALID_ENVIRONMENTS:
            raise ValueError(f"ENVIRONMENT must be one of {sorted(VALID_ENVIRONMENTS)}")

        if settings_obj.classifier_timeout_seconds <= 0:
            raise ValueError("CLASSIFIER_TIMEOUT_SECONDS must be positive")

        if settings_obj.max_answer_length <= 0:
            raise ValueError("MAX_ANSWER_LENGTH must be positive")

        if not settings_obj.gemini_api_key and not settings_obj.openai_api_key:
            print("--- [WARN] No AI API key configured; classification will use local fallbacks only.")

        return settings_obj

    except Exception as e:
        print(f"--- [ERROR] Environment validation failed: {e}")
        sys.exit(1)


settings = Settings()
validate_environment(settings)
