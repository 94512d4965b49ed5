from .errors import (
    IniNotFoundError,
    IniParseError,
    IniStoreError,
    MissingKeyError,
    SettingsError,
)
from .lookup import Found, KeyNotFound, Lookup, SectionNotFound
from .parser import Document, dumps, loads
from .settings import StoreSettings, load_settings
from .store import IniStore, get_value_by_key, modify_key, read, write


__all__ = [
    "IniStore",
    "read",
    "write",
    "modify_key",
    "get_value_by_key",
    "loads",
    "dumps",
    "Document",
    "Lookup",
    "Found",
    "SectionNotFound",
    "KeyNotFound",
    "StoreSettings",
    "load_settings",
    "IniStoreError",
    "IniNotFoundError",
    "IniParseError",
    "MissingKeyError",
    "SettingsError",
]
