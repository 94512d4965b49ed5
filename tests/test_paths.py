from pathlib import Path

from inistore.paths import settings_file, user_config_dir


def test_user_config_dir_absolute(monkeypatch) -> None:
    monkeypatch.delenv("INISTORE_CONFIG_DIR", raising=False)
    assert user_config_dir().is_absolute()
    assert settings_file().name == "settings.ini"


def test_config_dir_env_override(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("INISTORE_CONFIG_DIR", str(tmp_path))
    assert user_config_dir() == tmp_path.resolve()
    assert settings_file() == tmp_path.resolve() / "settings.ini"
