"""Server configuration loaded from arguments, environment and ``.env`` files."""

import logging
import os
from dataclasses import dataclass, replace
from typing import Dict, Mapping, Optional

from dotenv import load_dotenv

from models import ProviderName

from .constants import DEFAULT_CORS_ORIGIN, DEFAULT_HOST, DEFAULT_LOG_LEVEL, DEFAULT_PORT
from .providers import LLMConfig

logger = logging.getLogger(__name__)

_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class ServerConfig:
    """Configuration for a Beacon server.

    Attributes:
        host: Interface the HTTP transport binds to
        port: Port the HTTP transport binds to
        cors: Whether to send CORS headers
        cors_origin: Allowed CORS origin
        log_level: Logging level name
        llm: Optional external generator configuration; None disables the
            generator branch of the query router
    """

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    cors: bool = True
    cors_origin: str = DEFAULT_CORS_ORIGIN
    log_level: str = DEFAULT_LOG_LEVEL
    llm: Optional[LLMConfig] = None

    def with_llm(self, llm: Optional[LLMConfig]) -> "ServerConfig":
        return replace(self, llm=llm)


def _parse_int(env: Mapping[str, str], name: str) -> Optional[int]:
    value = env.get(name)
    if value in (None, ""):
        return None
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {value!r}") from None


def _parse_float(env: Mapping[str, str], name: str) -> Optional[float]:
    value = env.get(name)
    if value in (None, ""):
        return None
    try:
        return float(value)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {value!r}") from None


def load_llm_config(env: Mapping[str, str]) -> Optional[LLMConfig]:
    """Build the generator configuration from environment variables.

    Returns None when ``LLM_PROVIDER`` is not set.
    """
    provider = (env.get("LLM_PROVIDER") or "").strip().lower()
    if not provider:
        return None

    model = env.get("LLM_MODEL")
    if not model and provider == ProviderName.OLLAMA.value:
        model = env.get("OLLAMA_MODEL")

    api_key = env.get("LLM_API_KEY")
    if not api_key and provider == ProviderName.OPENAI.value:
        api_key = env.get("OPENAI_API_KEY")

    return LLMConfig(
        provider=provider,
        api_key=api_key or None,
        model=model or None,
        base_url=env.get("LLM_BASE_URL") or None,
        temperature=_parse_float(env, "LLM_TEMPERATURE"),
        max_tokens=_parse_int(env, "LLM_MAX_TOKENS"),
    )


def load_config(env: Optional[Mapping[str, str]] = None) -> ServerConfig:
    """Load the server configuration.

    Args:
        env: Mapping to read variables from. Defaults to ``os.environ`` after
            loading a ``.env`` file.

    Returns:
        The server configuration

    Raises:
        ValueError: If a numeric variable is malformed
    """
    if env is None:
        load_dotenv()
        env = os.environ

    cors = env.get("BEACON_CORS")
    return ServerConfig(
        host=env.get("BEACON_HOST") or DEFAULT_HOST,
        port=_parse_int(env, "BEACON_PORT") or DEFAULT_PORT,
        cors=True if cors in (None, "") else cors.strip().lower() in _TRUE_VALUES,
        cors_origin=env.get("BEACON_CORS_ORIGIN") or DEFAULT_CORS_ORIGIN,
        log_level=(env.get("LOG_LEVEL") or DEFAULT_LOG_LEVEL).lower(),
        llm=load_llm_config(env),
    )


# Example configurations
EXAMPLE_CONFIGS: Dict[str, ServerConfig] = {
    "openai": ServerConfig(
        llm=LLMConfig(
            provider=ProviderName.OPENAI.value,
            api_key=os.getenv("OPENAI_API_KEY"),
            model="gpt-3.5-turbo",
            temperature=0.7,
            max_tokens=1000,
        ),
    ),
    "ollama": ServerConfig(
        llm=LLMConfig(
            provider=ProviderName.OLLAMA.value,
            base_url="http://localhost:11434",
            # Any model pulled into the local Ollama instance works here
            model=os.getenv("OLLAMA_MODEL", "llama2"),
            temperature=0.7,
        ),
    ),
    "simulated": ServerConfig(),
}
