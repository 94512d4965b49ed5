from __future__ import annotations

import logging
import shutil
import tempfile
from collections.abc import Mapping
from pathlib import Path

from .errors import IniNotFoundError
from .lookup import Found, Lookup, lookup
from .parser import Document, dumps, parse_lines
from .settings import StoreSettings

logger = logging.getLogger(__name__)


def read(path: str | Path, *, encoding: str | None = None, strict: bool = False) -> Document:
    """Parse the INI file at *path* into a fresh document.

    Raises :class:`IniNotFoundError` when *path* does not exist.
    """
    path = Path(path)
    if not path.exists():
        raise IniNotFoundError(path)
    with path.open("r", encoding=encoding) as fh:
        doc = parse_lines(fh, strict=strict)
    logger.debug("read %d section(s) from %s", len(doc), path)
    return doc


def write(
    path: str | Path,
    doc: Mapping[str, Mapping[str, str]],
    *,
    encoding: str | None = None,
    atomic: bool = True,
) -> None:
    """Serialize *doc* to *path*, replacing any existing content.

    With *atomic* the text goes to a temporary sibling which then replaces
    *path*; the temporary file never outlives the call.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    if not atomic:
        with path.open("w", encoding=encoding) as fh:
            fh.write(dumps(doc))
        logger.debug("wrote %d section(s) to %s", len(doc), path)
        return
    with tempfile.NamedTemporaryFile(
        "w",
        encoding=encoding,
        dir=path.parent,
        prefix=f".{path.name}.",
        suffix=".tmp",
        delete=False,
    ) as fh:
        tmp = Path(fh.name)
        try:
            fh.write(dumps(doc))
        except BaseException:
            fh.close()
            tmp.unlink(missing_ok=True)
            raise
    try:
        if path.exists():
            shutil.copymode(path, tmp)
        tmp.replace(path)
    except BaseException:
        tmp.unlink(missing_ok=True)
        raise
    logger.debug("wrote %d section(s) to %s", len(doc), path)


def modify_key(
    path: str | Path,
    section: str,
    key: str,
    new_value: str,
    *,
    encoding: str | None = None,
    strict: bool = False,
    atomic: bool = True,
) -> Lookup:
    """Set an existing *key* in *section* and rewrite the file.

    Returns ``Found(new_value)`` when the file was rewritten.  When the section
    or key is absent the file is left untouched and the miss is returned.
    """
    doc = read(path, encoding=encoding, strict=strict)
    result = lookup(doc, section, key)
    if not result.found:
        return result
    doc[section][key] = new_value
    write(path, doc, encoding=encoding, atomic=atomic)
    return Found(new_value)


def get_value_by_key(
    path: str | Path,
    section: str,
    key: str,
    *,
    encoding: str | None = None,
    strict: bool = False,
) -> Lookup:
    return lookup(read(path, encoding=encoding, strict=strict), section, key)


class IniStore:
    """An INI file path bound to :class:`StoreSettings`.

    Every call goes back to the file; nothing is cached between calls.
    """

    def __init__(self, path: str | Path, settings: StoreSettings | None = None) -> None:
        self.path = Path(path)
        self.settings = settings or StoreSettings()

    def __repr__(self) -> str:
        return f"IniStore({str(self.path)!r})"

    def exists(self) -> bool:
        return self.path.exists()

    def read(self) -> Document:
        return read(self.path, encoding=self.settings.encoding, strict=self.settings.strict)

    def write(self, doc: Mapping[str, Mapping[str, str]]) -> None:
        write(self.path, doc, encoding=self.settings.encoding, atomic=self.settings.atomic)

    def modify_key(self, section: str, key: str, new_value: str) -> Lookup:
        return modify_key(
            self.path,
            section,
            key,
            new_value,
            encoding=self.settings.encoding,
            strict=self.settings.strict,
            atomic=self.settings.atomic,
        )

    def get_value_by_key(self, section: str, key: str) -> Lookup:
        return get_value_by_key(
            self.path,
            section,
            key,
            encoding=self.settings.encoding,
            strict=self.settings.strict,
        )
