import pytest

from ai_search.settings import get_settings

CONFIG_ENV_VARS = [
    "GOOGLE_API_KEY",
    "GOOGLE_CX",
    "OPENAI_API_KEY",
    "GEMINI_API_KEY",
    "FETCH_LIBRARY",
    "SUMMARY_MODEL",
    "NUM_RESULTS",
    "OPENAI_MODEL",
    "GEMINI_MODEL",
    "MAX_OUTPUT_TOKENS",
    "LOG_DIR",
]


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Isolate settings from the host environment and any local .env file."""
    for name in CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()
