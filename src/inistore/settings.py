"""Store settings resolved from the user settings file and the environment.

The settings file is itself an INI file (``[inistore]`` section) and is read
with this package's own parser.  Environment variables override it::

    INISTORE_ENCODING=utf-8
    INISTORE_STRICT=yes
    INISTORE_ATOMIC=no
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

from .errors import SettingsError
from .parser import parse_lines
from .paths import APP_NAME, settings_file

logger = logging.getLogger(__name__)

ENV_PREFIX = "INISTORE_"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class StoreSettings:
    encoding: str | None = None
    strict: bool = False
    atomic: bool = True

    def merged(self, overrides: Mapping[str, Any]) -> StoreSettings:
        """Return a copy with non-``None`` *overrides* applied."""
        known = {f.name for f in fields(self)}
        changes: dict[str, Any] = {}
        for name, value in overrides.items():
            if name not in known:
                raise SettingsError(f"unknown setting {name!r}")
            if value is not None:
                changes[name] = value
        return replace(self, **changes)


def parse_bool(raw: str) -> bool:
    val = raw.strip().lower()
    if val in _TRUE:
        return True
    if val in _FALSE:
        return False
    raise SettingsError(f"invalid boolean value: {raw!r}")


def _coerce(raw: Mapping[str, str]) -> dict[str, Any]:
    out: dict[str, Any] = {}
    for name, value in raw.items():
        if name == "encoding":
            out[name] = value or None
        elif name in ("strict", "atomic"):
            out[name] = parse_bool(value)
        else:
            raise SettingsError(f"unknown setting {name!r}")
    return out


def read_settings_file(path: Path) -> dict[str, Any]:
    if not path.is_file():
        return {}
    with path.open("r") as fh:
        doc = parse_lines(fh)
    return _coerce(doc.get(APP_NAME, {}))


def read_env(environ: Mapping[str, str] | None = None) -> dict[str, Any]:
    env = os.environ if environ is None else environ
    raw: dict[str, str] = {}
    for name in ("encoding", "strict", "atomic"):
        value = env.get(ENV_PREFIX + name.upper())
        if value is not None:
            raw[name] = value
    return _coerce(raw)


def load_settings(
    path: Path | None = None,
    *,
    environ: Mapping[str, str] | None = None,
    **overrides: Any,
) -> StoreSettings:
    """Resolve settings: defaults, then settings file, then environment, then *overrides*."""
    cfg = path if path is not None else settings_file()
    settings = StoreSettings()
    try:
        settings = settings.merged(read_settings_file(cfg))
    except (SettingsError, OSError, UnicodeError) as exc:
        logger.warning("Ignoring settings file %s: %s", cfg, exc)
    settings = settings.merged(read_env(environ))
    settings = settings.merged(overrides)
    logger.debug("resolved settings %s", settings)
    return settings
