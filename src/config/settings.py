"""Application settings and configuration."""

from functools import lru_cache
from typing import Literal

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings

# Load .env file if present
load_dotenv()


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Provider Configuration
    llm_provider: Literal["bedrock", "anthropic"] = Field(
        default="bedrock",
        description="Which LangChain chat model backs the tutor",
        validation_alias="LLM_PROVIDER",
    )

    aws_default_region: str | None = Field(
        default=None,
        description="AWS region for Bedrock (falls back to the boto3 chain)",
        validation_alias="AWS_DEFAULT_REGION",
    )

    anthropic_api_key: str | None = Field(
        default=None,
        description="Anthropic API key, only used with LLM_PROVIDER=anthropic",
        validation_alias="ANTHROPIC_API_KEY",
    )

    # Model Configuration
    model_name: str = Field(
        default="anthropic.claude-3-7-sonnet-20250219-v1:0",
        description="Model to use (Bedrock model ID or Anthropic model name)",
        validation_alias="MODEL_NAME",
    )

    # Generation Settings
    generation_temperature: float = Field(
        default=0.7,
        ge=0.0,
        le=1.0,
        description="Temperature for learning module generation",
        validation_alias="GENERATION_TEMPERATURE",
    )

    evaluation_temperature: float = Field(
        default=0.1,  # grading should be as repeatable as possible
        ge=0.0,
        le=1.0,
        description="Temperature for code answer evaluation",
        validation_alias="EVALUATION_TEMPERATURE",
    )

    max_output_tokens: int = Field(
        default=8192,
        ge=256,
        description="Upper bound on tokens returned per call",
        validation_alias="MAX_OUTPUT_TOKENS",
    )

    quiz_question_count: int = Field(
        default=4,
        ge=2,
        le=10,
        description="Number of quiz questions requested per module",
        validation_alias="QUIZ_QUESTION_COUNT",
    )

    # Transport Settings
    request_timeout_seconds: float = Field(
        default=90.0,
        gt=0.0,
        description="Deadline for a single upstream call (no retries)",
        validation_alias="REQUEST_TIMEOUT_SECONDS",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Root log level",
        validation_alias="LOG_LEVEL",
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "protected_namespaces": (),
    }


# This is loaded the first time and then cached for further use by the agents
@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings object with loaded configuration
    """
    return Settings()
