import pytest

from utils.config_loader import DEFAULT_CONFIG, load_config


def test_partial_file_is_merged_with_defaults(tmp_path):
    path = tmp_path / "config.yml"
    path.write_text("settings:\n  locale: tr\napi:\n  enabled: true\n", encoding="utf-8")

    cfg = load_config(str(path))

    assert cfg["settings"]["locale"] == "tr"
    assert cfg["settings"]["method"] == 3
    assert cfg["api"]["enabled"] is True
    assert cfg["api"]["port"] == 8000
    assert cfg["location"] == DEFAULT_CONFIG["location"]


def test_explicit_missing_path_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(str(tmp_path / "nope.yml"))


def test_missing_default_file_uses_defaults(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    cfg = load_config()
    assert cfg == DEFAULT_CONFIG
    assert cfg is not DEFAULT_CONFIG
