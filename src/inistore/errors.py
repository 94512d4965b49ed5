from __future__ import annotations

from pathlib import Path


class IniStoreError(Exception):
    """Base class for inistore errors."""


class IniNotFoundError(IniStoreError):
    """Raised when an INI file does not exist at read time."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        super().__init__(f"INI file not found: {self.path}")


class IniParseError(IniStoreError):
    """Raised in strict mode for a line that carries no section or entry."""

    def __init__(self, lineno: int, line: str, reason: str) -> None:
        self.lineno = lineno
        self.line = line
        self.reason = reason
        super().__init__(f"line {lineno}: {reason}: {line!r}")


class MissingKeyError(IniStoreError, KeyError):
    """Raised when an absent lookup result is unwrapped."""

    def __init__(self, section: str, key: str | None = None) -> None:
        self.section = section
        self.key = key
        super().__init__(section if key is None else f"{section}.{key}")

    def __str__(self) -> str:
        if self.key is None:
            return f"section {self.section!r} not found"
        return f"key {self.key!r} not found in section {self.section!r}"


class SettingsError(IniStoreError):
    """Raised when a settings value cannot be interpreted."""
