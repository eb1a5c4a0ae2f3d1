import json

import pytest

from novelupdates.infra.config.adapter import ConfigAdapter, load_client_config
from novelupdates.infra.config.file_io import (
    copy_default_config,
    find_config_file,
    load_config,
    read_config_file,
)
from novelupdates.infra.http_defaults import DEFAULT_IMPERSONATE

USER_SETTINGS = "novelupdates.infra.paths.SETTING_PATH"

# ================================================================
# Settings lookup
# ================================================================


def test_load_config_user_path_exists(tmp_path, monkeypatch):
    """User passed config_path and the file exists -> load it directly."""
    cfgfile = tmp_path / "custom.toml"
    cfgfile.write_text("[general]\nbackend = 'httpx'", encoding="utf-8")

    monkeypatch.chdir(tmp_path)

    cfg = load_config(config_path=cfgfile)
    assert cfg == {"general": {"backend": "httpx"}}


def test_load_config_user_path_not_exists(tmp_path):
    """User provided config path but it doesn't exist -> FileNotFoundError."""
    with pytest.raises(FileNotFoundError):
        load_config(config_path=tmp_path / "not_exists.toml")


def test_load_config_local_settings_toml(tmp_path, monkeypatch):
    """No config_path, local settings.toml exists in cwd -> load that file."""
    (tmp_path / "settings.toml").write_text("a = 1", encoding="utf-8")
    (tmp_path / "settings.json").write_text('{"a": 2}', encoding="utf-8")

    monkeypatch.chdir(tmp_path)

    assert load_config() == {"a": 1}


def test_load_config_local_settings_json(tmp_path, monkeypatch):
    """No config_path, local settings.json exists -> load it."""
    settings = tmp_path / "settings.json"
    settings.write_text(json.dumps({"a": 1, "b": "2"}), encoding="utf-8")

    monkeypatch.chdir(tmp_path)

    assert load_config() == {"a": 1, "b": "2"}


def test_load_config_fallback_setting_file(tmp_path, monkeypatch):
    """No config_path, no local file, but user settings file exists -> load it."""
    fallback = tmp_path / "user" / "settings.toml"
    fallback.parent.mkdir()
    fallback.write_text("a = 1", encoding="utf-8")

    monkeypatch.setattr(USER_SETTINGS, fallback)
    monkeypatch.chdir(tmp_path)

    assert load_config() == {"a": 1}


def test_load_config_none_found(tmp_path, monkeypatch):
    """No user path, no local settings, no fallback file -> FileNotFoundError."""
    monkeypatch.setattr(USER_SETTINGS, tmp_path / "nofile.toml")
    monkeypatch.chdir(tmp_path)

    with pytest.raises(FileNotFoundError):
        load_config()


def test_find_config_file_explicit_path_skips_lookup(tmp_path, monkeypatch):
    """A missing explicit path is not replaced by a local settings file."""
    (tmp_path / "settings.toml").write_text("a = 1", encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    assert find_config_file(tmp_path / "other.toml") is None
    assert find_config_file() == (tmp_path / "settings.toml").resolve()


def test_load_client_config(tmp_path):
    cfgfile = tmp_path / "custom.json"
    cfgfile.write_text(
        json.dumps({"sites": {"novelupdates": {"backend": "httpx"}}}),
        encoding="utf-8",
    )

    cfg = load_client_config(cfgfile)
    assert cfg.fetcher_cfg.backend == "httpx"
    assert cfg.fetcher_cfg.session_cfg.impersonate == DEFAULT_IMPERSONATE


# ================================================================
# read_config_file errors
# ================================================================


@pytest.mark.parametrize(
    "name, content, message",
    [
        ("broken.json", "{ invalid json", "Invalid JSON in"),
        ("broken.toml", "a = [1,2,,3]", "Invalid TOML in"),
        ("settings.yaml", "hello: 1", "Unsupported config file extension"),
        ("not_dict.json", "[1, 2, 3]", "Config root must be a dict"),
    ],
)
def test_read_config_file_errors(tmp_path, name, content, message):
    path = tmp_path / name
    path.write_text(content, encoding="utf-8")

    with pytest.raises(ValueError) as exc:
        read_config_file(path)

    assert message in str(exc.value)


# ================================================================
# copy_default_config
# ================================================================


def test_copy_default_config(tmp_path):
    target = tmp_path / "out" / "settings.toml"
    copy_default_config(target)

    cfg = load_config(target)
    assert cfg["general"]["backend"] == "curl_cffi"
    assert cfg["general"]["parser"]["group_slug"] == "compat"


def test_sample_config_matches_defaults(tmp_path):
    target = tmp_path / "settings.toml"
    copy_default_config(target)

    client_cfg = ConfigAdapter(load_config(target)).get_client_config()
    assert client_cfg.fetcher_cfg.backend == "curl_cffi"
    assert client_cfg.fetcher_cfg.encode_query is True
    assert client_cfg.fetcher_cfg.session_cfg.impersonate == DEFAULT_IMPERSONATE
    assert client_cfg.parser_cfg.compat_label_trim is True
