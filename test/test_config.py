import pytest
from pydantic import ValidationError

from dfa_core.config import Settings, load_settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for key in ["DFA_CONFIG", "DFA_LOG_LEVEL", "DFA_LOG_DIR", "DFA_TRUNCATE_SYMBOLS", "DFA_MAX_WORD_LENGTH"]:
        monkeypatch.delenv(key, raising=False)
    # no ./config/dfa.yaml in an empty directory
    monkeypatch.chdir(tmp_path)


def test_defaults():
    settings = load_settings()
    assert settings == Settings()
    assert settings.log_level == "WARNING"
    assert settings.log_dir is None
    assert settings.truncate_symbols is False


def test_yaml_file(tmp_path):
    path = tmp_path / "custom.yaml"
    path.write_text("log_level: debug\ntruncate_symbols: true\nmax_word_length: 50\n", encoding="utf-8")
    settings = load_settings(str(path))
    assert settings.log_level == "DEBUG"
    assert settings.truncate_symbols is True
    assert settings.max_word_length == 50


def test_default_location_in_cwd(tmp_path):
    (tmp_path / "config").mkdir()
    (tmp_path / "config" / "dfa.yaml").write_text("log_level: error\n", encoding="utf-8")
    assert load_settings().log_level == "ERROR"


def test_env_overrides_file(tmp_path, monkeypatch):
    path = tmp_path / "custom.yaml"
    path.write_text("log_level: info\n", encoding="utf-8")
    monkeypatch.setenv("DFA_CONFIG", str(path))
    monkeypatch.setenv("DFA_LOG_LEVEL", "error")
    monkeypatch.setenv("DFA_TRUNCATE_SYMBOLS", "true")
    settings = load_settings()
    assert settings.log_level == "ERROR"
    assert settings.truncate_symbols is True


def test_empty_file_gives_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert load_settings(str(path)) == Settings()


def test_explicit_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_settings(str(tmp_path / "missing.yaml"))


@pytest.mark.parametrize("key, value", [
    ("DFA_LOG_LEVEL", "LOUD"),
    ("DFA_MAX_WORD_LENGTH", "0"),
    ("DFA_TRUNCATE_SYMBOLS", "perhaps"),
])
def test_invalid_values(monkeypatch, key, value):
    monkeypatch.setenv(key, value)
    with pytest.raises(ValidationError):
        load_settings()


def test_non_mapping_file(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_settings(str(path))


def test_shipped_example_file_is_valid():
    from pathlib import Path
    example = Path(__file__).parent.parent / "config" / "dfa.example.yaml"
    assert load_settings(str(example)) == Settings()
