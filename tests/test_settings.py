from __future__ import annotations

from pathlib import Path

import pytest

from inistore.errors import SettingsError
from inistore.settings import StoreSettings, load_settings, parse_bool, read_env


def test_defaults_without_file_or_env(tmp_path: Path):
    settings = load_settings(tmp_path / "missing.ini", environ={})
    assert settings == StoreSettings(encoding=None, strict=False, atomic=True)


def test_settings_file_is_read(tmp_path: Path):
    cfg = tmp_path / "settings.ini"
    cfg.write_text("[inistore]\nencoding = utf-8\nstrict = yes\n[other]\natomic=no\n")
    settings = load_settings(cfg, environ={})
    assert settings == StoreSettings(encoding="utf-8", strict=True, atomic=True)


def test_env_overrides_file(tmp_path: Path):
    cfg = tmp_path / "settings.ini"
    cfg.write_text("[inistore]\nencoding=utf-8\natomic=on\n")
    env = {"INISTORE_ENCODING": "latin-1", "INISTORE_ATOMIC": "0"}
    settings = load_settings(cfg, environ=env)
    assert settings.encoding == "latin-1"
    assert settings.atomic is False


def test_explicit_overrides_win_and_none_is_ignored(tmp_path: Path):
    env = {"INISTORE_STRICT": "true"}
    settings = load_settings(tmp_path / "x.ini", environ=env, strict=None, encoding="utf-16")
    assert settings.strict is True
    assert settings.encoding == "utf-16"


def test_default_settings_file_location(tmp_path: Path, monkeypatch):
    monkeypatch.setenv("INISTORE_CONFIG_DIR", str(tmp_path))
    (tmp_path / "settings.ini").write_text("[inistore]\nstrict=1\n")
    monkeypatch.setenv("INISTORE_ENCODING", "ascii")
    settings = load_settings()
    assert settings == StoreSettings(encoding="ascii", strict=True, atomic=True)


def test_invalid_settings_file_is_ignored(tmp_path: Path, caplog):
    cfg = tmp_path / "settings.ini"
    cfg.write_text("[inistore]\nstrict=maybe\n")
    settings = load_settings(cfg, environ={})
    assert settings == StoreSettings()
    assert "Ignoring settings file" in caplog.text


def test_invalid_env_value_raises():
    with pytest.raises(SettingsError):
        read_env({"INISTORE_STRICT": "sometimes"})


def test_unknown_override_raises(tmp_path: Path):
    with pytest.raises(SettingsError):
        load_settings(tmp_path / "x.ini", environ={}, colour="blue")


@pytest.mark.parametrize(
    "raw,expected",
    [("1", True), ("Yes", True), (" on ", True), ("TRUE", True), ("0", False), ("off", False)],
)
def test_parse_bool(raw, expected):
    assert parse_bool(raw) is expected


def test_non_utf8_settings_file_is_ignored(tmp_path: Path, caplog):
    cfg = tmp_path / "settings.ini"
    cfg.write_bytes(b"[inistore]\nencoding=\xff\xfe\nstrict=\xff\n")
    settings = load_settings(cfg, environ={"INISTORE_ATOMIC": "no"})
    assert settings == StoreSettings(atomic=False)
    assert "Ignoring settings file" in caplog.text


def test_unreadable_settings_file_is_ignored(tmp_path: Path, monkeypatch, caplog):
    cfg = tmp_path / "settings.ini"
    cfg.write_text("[inistore]\nstrict=yes\n")

    def denied(self, *args, **kwargs):
        raise PermissionError(13, "Permission denied", str(self))

    monkeypatch.setattr(Path, "open", denied)
    assert load_settings(cfg, environ={}) == StoreSettings()
    assert "Ignoring settings file" in caplog.text
