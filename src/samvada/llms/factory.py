# src/samvada/llms/factory.py

from .base import LLMClient
from .config import LLMConfig


def create_llm_client(config: LLMConfig) -> LLMClient:
    """Create an LLM client from config.

    Args:
        config: LLM configuration specifying provider, model, etc.

    Returns:
        Configured LLMClient implementation.

    Raises:
        ValueError: If provider is unknown.

    Example:
        >>> config = LLMConfig(provider="openai", model="gpt-4o-mini")
        >>> client = create_llm_client(config)
        >>> response = await client.complete(messages=[...])
    """
    if config.provider == "openai":
        from .openai import OpenAILLMClient

        return OpenAILLMClient(
            api_key=config.api_key,
            model=config.model,
            base_url=config.base_url,
            timeout=config.timeout,
            max_retries=config.max_retries,
        )

    raise ValueError(f"Unknown LLM provider: {config.provider}")
