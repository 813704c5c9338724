import pytest

from beacon import BeaconServer, Registry
from beacon.defaults import register_defaults


@pytest.fixture
def registry():
    """Empty registry."""
    return Registry()


@pytest.fixture
def server():
    """Server with the default catalog and no generator."""
    server = BeaconServer()
    register_defaults(server.registry)
    return server


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep the host environment out of configuration and log files."""
    for name in (
        "LLM_PROVIDER",
        "LLM_API_KEY",
        "LLM_MODEL",
        "LLM_BASE_URL",
        "LLM_TEMPERATURE",
        "LLM_MAX_TOKENS",
        "OPENAI_API_KEY",
        "OLLAMA_MODEL",
        "BEACON_HOST",
        "BEACON_PORT",
        "BEACON_CORS",
        "BEACON_CORS_ORIGIN",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.chdir(tmp_path)
