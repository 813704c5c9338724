"""Factory mapping a provider identifier to a generator implementation."""

import logging
from typing import Dict, Optional, Type

import httpx

from models import ProviderName

from ..errors import UnsupportedProviderError
from .base import GeneratorProvider, LLMConfig
from .ollama_provider import OllamaProvider
from .openai_provider import OpenAIProvider

logger = logging.getLogger(__name__)

PROVIDERS: Dict[str, Type[GeneratorProvider]] = {
    ProviderName.OPENAI.value: OpenAIProvider,
    ProviderName.OLLAMA.value: OllamaProvider,
}


def create_provider(
    config: LLMConfig, client: Optional[httpx.AsyncClient] = None
) -> GeneratorProvider:
    """Build the generator named by ``config.provider``.

    Args:
        config: Generator configuration
        client: Optional HTTP client handed to the provider

    Returns:
        A provider instance

    Raises:
        UnsupportedProviderError: If the provider identifier is unknown
    """
    provider_cls = PROVIDERS.get(str(config.provider or "").lower())
    if provider_cls is None:
        raise UnsupportedProviderError(config.provider, supported=sorted(PROVIDERS))

    provider = provider_cls(config, client=client)
    logger.debug(f"Created {provider_cls.__name__} (model={provider.model})")
    return provider
