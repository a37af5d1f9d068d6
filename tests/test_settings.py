# tests/test_settings.py

from works_graph.config import settings as settings_module
from works_graph.config.settings import Settings, get_settings


def test_defaults():
    settings = Settings()

    assert settings.DOT_COMMAND == "dot"
    assert settings.DEFAULT_OUTPUT_TYPE == "svg"
    assert settings.LOG_LEVEL == "WARNING"


def test_env_override(monkeypatch):
    monkeypatch.setenv("WORKS_GRAPH_DOT_COMMAND", "/usr/local/bin/dot")
    monkeypatch.setenv("WORKS_GRAPH_DEFAULT_OUTPUT_TYPE", "png")

    settings = Settings()

    assert settings.DOT_COMMAND == "/usr/local/bin/dot"
    assert settings.DEFAULT_OUTPUT_TYPE == "png"


def test_get_settings_is_cached(monkeypatch):
    monkeypatch.setattr(settings_module, "_settings", None)

    first = get_settings()
    assert get_settings() is first
