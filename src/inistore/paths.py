from __future__ import annotations

import os
from pathlib import Path

from platformdirs import user_config_dir as _uc

APP_NAME = "inistore"
SETTINGS_FILENAME = "settings.ini"


def user_config_dir(app_name: str = APP_NAME) -> Path:
    env = os.getenv("INISTORE_CONFIG_DIR")
    if env:
        return Path(env).expanduser().resolve()
    return Path(_uc(appname=app_name)).resolve()


def settings_file(app_name: str = APP_NAME) -> Path:
    return user_config_dir(app_name) / SETTINGS_FILENAME
