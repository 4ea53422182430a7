"""Chat model factory shared by the tutor agents."""

from botocore.config import Config
from langchain_anthropic import ChatAnthropic
from langchain_aws import ChatBedrock
from langchain_core.language_models.chat_models import BaseChatModel

from src.config.settings import Settings, get_settings


def create_chat_model(temperature: float, settings: Settings | None = None) -> BaseChatModel:
    """
    Build the configured chat model.

    Every call gets a fixed deadline of ``request_timeout_seconds`` and no
    automatic retries; a failed call is reported to the caller once.

    Args:
        temperature: Sampling temperature for this agent
        settings: Settings override (defaults to the cached settings)

    Returns:
        LangChain chat model ready for ``with_structured_output``
    """
    settings = settings or get_settings()

    if settings.llm_provider == "anthropic":
        extra = {}
        if settings.anthropic_api_key:
            extra["api_key"] = settings.anthropic_api_key
        return ChatAnthropic(
            model=settings.model_name,
            temperature=temperature,
            max_tokens=settings.max_output_tokens,
            timeout=settings.request_timeout_seconds,
            max_retries=0,
            **extra,
        )

    return ChatBedrock(
        model=settings.model_name,
        temperature=temperature,
        max_tokens=settings.max_output_tokens,
        region_name=settings.aws_default_region,
        config=Config(
            connect_timeout=10,
            read_timeout=settings.request_timeout_seconds,
            retries={"total_max_attempts": 1, "mode": "standard"},
        ),
    )
