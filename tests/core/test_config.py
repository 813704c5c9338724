"""Tests for configuration loading."""

import pytest

from beacon.config import EXAMPLE_CONFIGS, ServerConfig, load_config, load_llm_config
from beacon.constants import DEFAULT_PORT


def test_defaults_from_empty_env():
    config = load_config({})

    assert config == ServerConfig()
    assert config.port == DEFAULT_PORT
    assert config.cors is True
    assert config.llm is None


def test_server_settings():
    config = load_config(
        {
            "BEACON_HOST": "0.0.0.0",
            "BEACON_PORT": "8080",
            "BEACON_CORS": "false",
            "BEACON_CORS_ORIGIN": "http://example.com",
            "LOG_LEVEL": "DEBUG",
        }
    )

    assert config.host == "0.0.0.0"
    assert config.port == 8080
    assert config.cors is False
    assert config.cors_origin == "http://example.com"
    assert config.log_level == "debug"


def test_invalid_port():
    with pytest.raises(ValueError, match="BEACON_PORT must be an integer"):
        load_config({"BEACON_PORT": "abc"})


def test_openai_config_uses_openai_key():
    llm = load_llm_config({"LLM_PROVIDER": "OpenAI", "OPENAI_API_KEY": "sk-test"})

    assert llm.provider == "openai"
    assert llm.api_key == "sk-test"
    assert llm.model is None


def test_ollama_config():
    llm = load_llm_config(
        {
            "LLM_PROVIDER": "ollama",
            "OLLAMA_MODEL": "mistral",
            "LLM_BASE_URL": "http://ollama:11434",
            "LLM_TEMPERATURE": "0",
            "LLM_MAX_TOKENS": "200",
        }
    )

    assert llm.model == "mistral"
    assert llm.base_url == "http://ollama:11434"
    assert llm.temperature == 0.0
    assert llm.max_tokens == 200


def test_invalid_temperature():
    with pytest.raises(ValueError, match="LLM_TEMPERATURE"):
        load_llm_config({"LLM_PROVIDER": "ollama", "LLM_TEMPERATURE": "warm"})


def test_example_configs():
    assert EXAMPLE_CONFIGS["simulated"].llm is None
    assert EXAMPLE_CONFIGS["openai"].llm.provider == "openai"
    assert EXAMPLE_CONFIGS["ollama"].llm.provider == "ollama"
