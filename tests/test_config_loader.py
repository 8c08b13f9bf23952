import pytest
from pydantic import ValidationError

from lessonplan_analyzer.config_loader import load_config


def test_defaults_without_file_or_env():
    cfg = load_config()
    assert cfg.gemini.model == "gemini-2.5-flash"
    assert cfg.gemini.api_key is None
    assert cfg.gemini.timeout_s is None
    assert not cfg.gemini.has_api_key()
    assert cfg.logging.level == "INFO"


def test_gemini_api_key_wins_over_api_key(monkeypatch):
    monkeypatch.setenv("API_KEY", "generic")
    monkeypatch.setenv("GEMINI_API_KEY", "specific")
    assert load_config().gemini.api_key == "specific"


def test_api_key_fallback(monkeypatch):
    monkeypatch.setenv("API_KEY", "generic")
    assert load_config().gemini.api_key == "generic"


def test_yaml_file_with_env_overrides(tmp_path, monkeypatch):
    path = tmp_path / "analyzer.yaml"
    path.write_text(
        "gemini:\n"
        "  model: gemini-1.5-pro\n"
        "  timeout_s: 20\n"
        "logging:\n"
        "  level: WARNING\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("GEMINI_TIMEOUT_S", "45")
    monkeypatch.setenv("GEMINI_ENDPOINT", "http://localhost:8080/v1beta")
    monkeypatch.setenv("LESSONPLAN_LOG_LEVEL", "DEBUG")

    cfg = load_config(str(path))
    assert cfg.gemini.model == "gemini-1.5-pro"
    assert cfg.gemini.timeout_s == 45.0
    assert cfg.gemini.endpoint == "http://localhost:8080/v1beta"
    assert cfg.logging.level == "DEBUG"


def test_model_override(monkeypatch):
    monkeypatch.setenv("GEMINI_MODEL", "gemini-2.0-flash")
    assert load_config().gemini.model == "gemini-2.0-flash"


def test_empty_yaml_file(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert load_config(str(path)).gemini.model == "gemini-2.5-flash"


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(str(tmp_path / "nope.yaml"))


def test_unparsable_timeout_is_validation_error(monkeypatch):
    monkeypatch.setenv("GEMINI_TIMEOUT_S", "abc")
    with pytest.raises(ValidationError):
        load_config()
